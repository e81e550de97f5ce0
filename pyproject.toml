[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "libraryledger"
version = "1.0.0"
description = "A small interactive ledger of library books, issues and logins kept in fixed-size binary record files"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "ledger", "issue", "cli", "records"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
libraryledger = "libraryledger.cli:main"

[tool.setuptools.packages.find]
include = ["libraryledger*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
