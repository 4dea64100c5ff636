[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysconf"
version = "0.0.1"
description = "List, query and change key/value entries in configuration files"
requires-python = ">=3.10"
dependencies = []
keywords = ["configuration", "config", "sysrc", "key-value", "administration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysconf = "sysconf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sysconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
