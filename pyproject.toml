[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unixpath"
version = "0.10.0"
description = "Byte-level Unix path parsing: components, iteration from both ends, and checked joining"
requires-python = ">=3.10"
dependencies = []
keywords = ["paths", "unix", "filesystem", "posix", "path-traversal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unixpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
