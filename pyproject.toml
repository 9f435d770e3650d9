[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fungeplus"
version = "1.0.0"
description = "Building blocks for Funge interpreters: vectors, Funge-space, stacks, instruction pointers, fingerprints and a debugger"
requires-python = ">=3.10"
dependencies = []
keywords = ["befunge", "funge", "funge-98", "esoteric", "fingerprints", "trefunge", "unefunge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fungeplus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
