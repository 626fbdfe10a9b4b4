[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgos"
version = "0.1.0"
description = "Classic data structures and algorithms: AVL trees, Huffman codes, backtracking solvers, a hashed record file, Prim's MST and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "avl-tree",
    "huffman",
    "backtracking",
    "knapsack",
    "n-queens",
    "tsp",
    "prim",
    "hashing",
    "sorting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgos-avl = "dsalgos.avl_tree:main"
dsalgos-friends = "dsalgos.friend_graph:main"
dsalgos-hamiltonian = "dsalgos.hamiltonian:main"
dsalgos-huffman = "dsalgos.huffman:main"
dsalgos-knapsack = "dsalgos.knapsack:main"
dsalgos-queens = "dsalgos.n_queens:main"
dsalgos-tsp = "dsalgos.tsp:main"
dsalgos-direct-access = "dsalgos.direct_access:main"
dsalgos-prims = "dsalgos.prims:main"
dsalgos-users = "dsalgos.sorting_searching:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
