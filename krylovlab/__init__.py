"""Dense, CSR and CSC matrices, a 2D Poisson Laplacian builder, a Matrix Market reader and iterative linear solvers."""

__version__ = "0.1.0"

__all__ = [
    "chrono",
    "cli",
    "csc",
    "csr",
    "dense",
    "formats",
    "gmres",
    "linalg",
    "matrix_market",
    "poisson",
    "solvers",
    "vectors",
]