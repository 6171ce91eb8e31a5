[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursorkit"
version = "0.1.0"
description = "Position-based cursors with counting, filtering, indirection, zipping and permutation adaptors"
requires-python = ">=3.10"
dependencies = []
keywords = ["cursor", "iterator", "adaptor", "zip", "permutation", "traversal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cursorkit-permutation-demo = "cursorkit.permutation:main"

[tool.hatch.build.targets.wheel]
packages = ["cursorkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
