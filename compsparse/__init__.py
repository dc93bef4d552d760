"""Compressed sparse matrices and vectors, products, triangular solves and graph utilities."""

__version__ = "0.1.0"

__all__ = [
    "indptr",
    "etree",
    "matrix",
    "special",
    "symmetric",
    "linalg",
    "trisolve",
    "sparse_trisolve",
    "start",
    "smmp",
    "matmul",
    "prod",
]