[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filescout"
version = "0.1.0"
description = "In-memory file database entries, filters, threaded search and sortable, selectable views"
requires-python = ">=3.10"
dependencies = []
keywords = ["file search", "file index", "filter", "search", "sorting", "natural sort"]
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
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["filescout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
