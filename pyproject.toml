[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scoresheet"
version = "0.1.0"
description = "A terminal cricket scoresheet: record an innings ball by ball and keep it on disk"
requires-python = ">=3.10"
dependencies = []
keywords = ["cricket", "scoresheet", "scoring", "terminal", "sports"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scoresheet = "scoresheet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scoresheet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
