[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsndn"
version = "0.1.0"
description = "Name-node metadata, segment placement and command parsing for a named-data distributed file system"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "distributed", "named-data", "namenode", "segments"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fsndn"]

[tool.pytest.ini_options]
addopts = "-ra"
