"""Matrix-vector products of the form ``alpha * A @ x + beta * b``."""

from __future__ import annotations

import numpy as np

from krylovlab.csr import CSRMatrix
from krylovlab.dense import DenseMatrix


def _operands(dim_x: int, dim_y: int, x, b) -> tuple[np.ndarray, np.ndarray]:
    vx = np.asarray(x, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if vx.ndim != 1 or vx.size != dim_y:
        raise ValueError(f"x must hold {dim_y} values")
    if vb.ndim != 1 or vb.size != dim_x:
        raise ValueError(f"b must hold {dim_x} values")
    return vx, vb


def general_mv(alpha: float, a: DenseMatrix, x, beta: float, b) -> np.ndarray:
    """Return ``alpha * A @ x + beta * b`` for a dense matrix."""
    vx, vb = _operands(a.dim_x, a.dim_y, x, b)
    return beta * vb + alpha * (a.data @ vx)


def csr_mv(alpha: float, a: CSRMatrix, x, beta: float, b) -> np.ndarray:
    """Return ``alpha * A @ x + beta * b`` for a CSR matrix."""
    vx, vb = _operands(a.dim_x, a.dim_y, x, b)
    rows = np.repeat(np.arange(a.dim_x), np.diff(a.row_index))
    products = alpha * a.data * vx[a.col_index]
    return beta * vb + np.bincount(rows, weights=products, minlength=a.dim_x)