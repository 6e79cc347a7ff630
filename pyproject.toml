[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zimkit"
version = "7.2.2"
description = "Building blocks for ZIM archives: little-endian decoding, LRU caches, UUIDs, directory entries and HTML text extraction."
requires-python = ">=3.10"
dependencies = []
keywords = ["zim", "archive", "offline", "lru-cache", "html", "parser", "dirent"]
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
    "Topic :: System :: Archiving",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zimkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
