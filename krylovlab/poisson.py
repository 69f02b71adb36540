"""Matrices of the five-point Laplacian on a square mesh."""

from __future__ import annotations

import numpy as np

from krylovlab.csr import CSRMatrix
from krylovlab.dense import DenseMatrix

_DIAGONAL = 4.0
_NEIGHBOUR = -1.0


def to_matrix_id(i: int, j: int, n: int) -> int:
    """Return the matrix index of mesh point ``(i, j)`` on an ``n`` wide mesh."""
    return i + n * j


def laplacian_nnz(mesh_size: int, matrix_size: int) -> int:
    """Return the number of non-zeros of the Laplacian for a given mesh."""
    if mesh_size <= 0 or matrix_size <= 0:
        raise ValueError("mesh and matrix sizes must be positive")
    return matrix_size + 4 * (matrix_size - mesh_size)


def _row_entries(i: int, j: int, n: int) -> list[tuple[int, float]]:
    """Return the (column, value) pairs of row ``(i, j)`` in increasing column order."""
    entries = []
    if j > 0:
        entries.append((to_matrix_id(i, j - 1, n), _NEIGHBOUR))
    if i > 0:
        entries.append((to_matrix_id(i - 1, j, n), _NEIGHBOUR))
    entries.append((to_matrix_id(i, j, n), _DIAGONAL))
    if i < n - 1:
        entries.append((to_matrix_id(i + 1, j, n), _NEIGHBOUR))
    if j < n - 1:
        entries.append((to_matrix_id(i, j + 1, n), _NEIGHBOUR))
    return entries


def _mesh_rows(mesh_size: int):
    if mesh_size <= 0:
        raise ValueError("mesh size must be positive")
    for j in range(mesh_size):
        for i in range(mesh_size):
            yield to_matrix_id(i, j, mesh_size), _row_entries(i, j, mesh_size)


def poisson_csr(mesh_size: int) -> CSRMatrix:
    """Build the ``mesh_size**2`` square Laplacian in CSR storage."""
    n = mesh_size * mesh_size if mesh_size > 0 else 0
    row_index = [0]
    cols: list[int] = []
    values: list[float] = []
    for _, entries in _mesh_rows(mesh_size):
        for col, value in entries:
            cols.append(col)
            values.append(value)
        row_index.append(len(cols))
    return CSRMatrix(n, n, row_index, cols, values)


def poisson_general(mesh_size: int) -> DenseMatrix:
    """Build the ``mesh_size**2`` square Laplacian as a dense matrix."""
    rows = list(_mesh_rows(mesh_size))
    n = mesh_size * mesh_size
    data = np.zeros((n, n), dtype=np.float64)
    for k, entries in rows:
        for col, value in entries:
            data[k, col] = value
    return DenseMatrix(data)