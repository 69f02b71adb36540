"""Conversions and comparisons between dense and CSR matrices."""

from __future__ import annotations

import numpy as np

from krylovlab.csr import CSRMatrix
from krylovlab.dense import DenseMatrix


def _row_ids(a: CSRMatrix) -> np.ndarray:
    return np.repeat(np.arange(a.dim_x), np.diff(a.row_index))


def nnz_in_general(a: DenseMatrix) -> int:
    """Return the number of non-zero entries of a dense matrix."""
    return int(np.count_nonzero(a.data))


def csr_to_csr(a: CSRMatrix) -> CSRMatrix:
    """Return an independent copy of a CSR matrix."""
    return CSRMatrix(
        a.dim_x, a.dim_y, a.row_index.copy(), a.col_index.copy(), a.data.copy()
    )


def general_to_csr(a: DenseMatrix) -> CSRMatrix:
    """Compress a dense matrix, keeping its non-zero entries row by row."""
    rows, cols = np.nonzero(a.data)
    counts = np.bincount(rows, minlength=a.dim_x)
    row_index = np.concatenate(([0], np.cumsum(counts)))
    return CSRMatrix(a.dim_x, a.dim_y, row_index, cols, a.data[rows, cols])


def csr_to_general(a: CSRMatrix) -> DenseMatrix:
    """Expand a CSR matrix into a dense one."""
    dense = np.zeros((a.dim_x, a.dim_y), dtype=np.float64)
    dense[_row_ids(a), a.col_index] = a.data
    return DenseMatrix(dense)


def general_to_general(a: DenseMatrix) -> DenseMatrix:
    """Return an independent copy of a dense matrix."""
    return DenseMatrix(a.data.copy())


def csr_equal_csr(a: CSRMatrix, b: CSRMatrix) -> bool:
    """Return True when both CSR matrices have identical storage."""
    if (a.dim_x, a.dim_y) != (b.dim_x, b.dim_y) or a.nnz() != b.nnz():
        return False
    return (
        np.array_equal(a.row_index, b.row_index)
        and np.array_equal(a.col_index, b.col_index)
        and np.array_equal(a.data, b.data)
    )


def general_equal_csr(a: DenseMatrix, b: CSRMatrix) -> bool:
    """Return True when a dense and a CSR matrix hold the same values."""
    if (a.dim_x, a.dim_y) != (b.dim_x, b.dim_y):
        return False
    return bool(np.array_equal(a.data, csr_to_general(b).data))


def general_equal_general(a: DenseMatrix, b: DenseMatrix) -> bool:
    """Return True when two dense matrices have the same shape and entries."""
    return a.data.shape == b.data.shape and bool(np.array_equal(a.data, b.data))