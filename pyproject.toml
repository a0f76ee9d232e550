[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmdgroup"
version = "0.1.0"
description = "Save shell commands under named groups and run them by name"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "commands", "aliases", "cli", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cg = "cmdgroup.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cmdgroup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
