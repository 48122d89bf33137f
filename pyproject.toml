[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algorithmia"
version = "0.1.0"
description = "Classic algorithms: sorting, graph search, spanning trees, knapsack, backtracking and small puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "graphs",
    "dijkstra",
    "floyd-warshall",
    "warshall",
    "kruskal",
    "prim",
    "knapsack",
    "n-queens",
    "travelling-salesman",
    "topological-sort",
    "assignment-problem",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algorithmia = "algorithmia.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algorithmia"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
