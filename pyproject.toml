[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonc"
version = "0.1.0"
description = "Building blocks for a JSON tokener: byte buffer, ordered hash table, string hashes, number parsing and RFC 6901 JSON Pointer"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "json-pointer", "rfc6901", "linkhash", "hashlittle", "utf-8"]
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
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
