[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mongr8"
version = "0.1.0"
description = "Declare MongoDB collections, fields and indexes, validate them, translate them into typed documents and drive a project's migration programs."
requires-python = ">=3.10"
dependencies = []
keywords = ["mongodb", "migration", "schema", "index", "database", "validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mongr8 = "mongr8.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mongr8"]

[tool.hatch.build.targets.sdist]
include = ["mongr8", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
