[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labtrees"
version = "0.1.0"
description = "Small tree, graph, heap and record-file structures: BSTs, expression trees, graph traversals, mark heaps and fixed-size record files."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "heap", "graph", "bfs", "dfs", "expression tree", "record file"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["labtrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
