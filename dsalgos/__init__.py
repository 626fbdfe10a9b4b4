"""Classic data structures and algorithms: trees, graphs, backtracking, hashing and sorting."""

__version__ = "0.1.0"