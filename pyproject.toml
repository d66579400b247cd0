[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memfs"
version = "0.1.0"
description = "An in-memory hierarchical file system with a small interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "in-memory", "shell", "directory", "tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
memfs = "memfs.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["memfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
