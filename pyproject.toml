[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algorithmics"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting, searching, bit tricks, heaps, backtracking, graphs, trees, greedy and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "graphs",
    "shortest-paths",
    "minimum-spanning-tree",
    "dynamic-programming",
    "backtracking",
    "heap",
    "binary-search-tree",
]
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
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algorithmics"]

[tool.pytest.ini_options]
addopts = "-ra"
