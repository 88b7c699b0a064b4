[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shadowfs"
version = "0.1.0"
description = "printf-style formatting with C integer semantics, C string helpers and a coloured level logger"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "snprintf", "format", "strtol", "c-string", "logging"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shadowfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
