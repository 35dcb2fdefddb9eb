[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlesolvers"
version = "1.0.0"
description = "Solvers for algorithmic puzzles: dynamic programming, sequence structures and graph search"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "avl-tree",
    "graphs",
    "bfs",
    "matrix-exponentiation",
    "puzzles",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzlesolvers-crypto = "puzzlesolvers.crypto:main"
puzzlesolvers-stocks = "puzzlesolvers.stocks:main"
puzzlesolvers-valley = "puzzlesolvers.valley:main"
puzzlesolvers-ridge = "puzzlesolvers.ridge:main"
puzzlesolvers-trigigel = "puzzlesolvers.trigigel:main"
puzzlesolvers-avl-demo = "puzzlesolvers.avl_sequence:main"
puzzlesolvers-array-demo = "puzzlesolvers.array_sequence:main"
puzzlesolvers-bridges = "puzzlesolvers.bridges:main"
puzzlesolvers-addresses = "puzzlesolvers.addresses:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlesolvers"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
