[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "btreedemo"
version = "0.1.0"
description = "Small B-tree examples: printing, searching, insertion and deletion"
requires-python = ">=3.10"
dependencies = []
keywords = ["b-tree", "btree", "data structures", "search tree", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
btreedemo = "btreedemo.cli:main"
btreedemo-print = "btreedemo.printtree:main"
btreedemo-search = "btreedemo.search:main"

[tool.hatch.build.targets.wheel]
packages = ["btreedemo"]

[tool.pytest.ini_options]
addopts = "-ra"
