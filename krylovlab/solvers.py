"""Iterative solvers for square linear systems: Jacobi, Gauss-Seidel and conjugate gradient."""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from krylovlab.csr import CSRMatrix
from krylovlab.dense import DenseMatrix
from krylovlab.linalg import csr_mv, general_mv

_RESIDUAL_REFRESH = 50

Vector = np.ndarray
MatVec = Callable[[Vector], Vector]


def _prepare(dim_x: int, dim_y: int, x, b, max_iterations: int) -> tuple[Vector, Vector]:
    if dim_x != dim_y:
        raise ValueError("the system matrix must be square")
    vx = np.array(x, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if vx.ndim != 1 or vx.size != dim_y:
        raise ValueError(f"x must hold {dim_y} values")
    if vb.ndim != 1 or vb.size != dim_x:
        raise ValueError(f"b must hold {dim_x} values")
    if max_iterations < 0:
        raise ValueError("max_iterations must not be negative")
    return vx, vb


def _check_diagonal(diag: Vector) -> Vector:
    if np.any(diag == 0.0):
        raise ValueError("the matrix has a zero on its diagonal")
    return diag


def _dense_diagonal(matrix: DenseMatrix) -> Vector:
    return _check_diagonal(np.diag(matrix.data).copy())


def _csr_row_ids(matrix: CSRMatrix) -> Vector:
    return np.repeat(np.arange(matrix.dim_x), np.diff(matrix.row_index))


def _csr_diagonal(matrix: CSRMatrix) -> Vector:
    rows = _csr_row_ids(matrix)
    on_diag = rows == matrix.col_index
    diag = np.zeros(matrix.dim_x, dtype=np.float64)
    diag[rows[on_diag]] = matrix.data[on_diag]
    return _check_diagonal(diag)


def residual_general(matrix: DenseMatrix, x, b) -> Vector:
    """Return ``b - A @ x`` for a dense matrix."""
    return general_mv(-1.0, matrix, x, 1.0, b)


def residual_csr(matrix: CSRMatrix, x, b) -> Vector:
    """Return ``b - A @ x`` for a CSR matrix."""
    return csr_mv(-1.0, matrix, x, 1.0, b)


def _jacobi(
    diag: Vector,
    off_diagonal: MatVec,
    x: Vector,
    b: Vector,
    max_iterations: int,
    tol: float,
) -> tuple[Vector, int]:
    inverse = 1.0 / diag
    for k in range(max_iterations):
        candidate = (b - off_diagonal(x)) * inverse
        if math.sqrt(float(np.sum((candidate - x) ** 2))) < tol:
            return x, k
        x = candidate
    return x, max_iterations


def jacobi_general(
    matrix: DenseMatrix, x, b, max_iterations: int = 1000, tol: float = 1e-6
) -> tuple[Vector, int]:
    """Run Jacobi sweeps on a dense system.

    Returns the iterate and the number of sweeps done; stops when two successive
    iterates differ by less than ``tol`` in Euclidean norm, keeping the older one.
    """
    vx, vb = _prepare(matrix.dim_x, matrix.dim_y, x, b, max_iterations)
    diag = _dense_diagonal(matrix)
    off = matrix.data.copy()
    np.fill_diagonal(off, 0.0)
    return _jacobi(diag, lambda v: off @ v, vx, vb, max_iterations, tol)


def jacobi_csr(
    matrix: CSRMatrix, x, b, max_iterations: int = 1000, tol: float = 1e-6
) -> tuple[Vector, int]:
    """Run Jacobi sweeps on a CSR system; same contract as :func:`jacobi_general`."""
    vx, vb = _prepare(matrix.dim_x, matrix.dim_y, x, b, max_iterations)
    diag = _csr_diagonal(matrix)
    rows = _csr_row_ids(matrix)
    keep = rows != matrix.col_index
    off_rows, off_cols, off_data = rows[keep], matrix.col_index[keep], matrix.data[keep]

    def off_diagonal(v: Vector) -> Vector:
        return np.bincount(off_rows, weights=off_data * v[off_cols], minlength=matrix.dim_x)

    return _jacobi(diag, off_diagonal, vx, vb, max_iterations, tol)


def _gauss_seidel(
    rows: Callable[[int], tuple[float, float]],
    x: Vector,
    b: Vector,
    max_iterations: int,
    tol: float,
) -> tuple[Vector, int]:
    for k in range(max_iterations):
        change = 0.0
        for i in range(x.size):
            off_sum, diag = rows(i)
            updated = (float(b[i]) - off_sum) * (1.0 / diag)
            change += (updated - float(x[i])) ** 2
            x[i] = updated
        if math.sqrt(change) < tol:
            return x, k
    return x, max_iterations


def gauss_seidel_general(
    matrix: DenseMatrix, x, b, max_iterations: int = 1000, tol: float = 1e-6
) -> tuple[Vector, int]:
    """Run Gauss-Seidel sweeps on a dense system.

    Returns the iterate and the number of the sweep whose update norm fell
    below ``tol``, or ``max_iterations`` when none did.
    """
    vx, vb = _prepare(matrix.dim_x, matrix.dim_y, x, b, max_iterations)
    _dense_diagonal(matrix)
    data = matrix.data

    def row(i: int) -> tuple[float, float]:
        line = data[i]
        off_sum = float(line[:i] @ vx[:i]) + float(line[i + 1 :] @ vx[i + 1 :])
        return off_sum, float(line[i])

    return _gauss_seidel(row, vx, vb, max_iterations, tol)


def gauss_seidel_csr(
    matrix: CSRMatrix, x, b, max_iterations: int = 1000, tol: float = 1e-6
) -> tuple[Vector, int]:
    """Run Gauss-Seidel sweeps on a CSR system; same contract as the dense version."""
    vx, vb = _prepare(matrix.dim_x, matrix.dim_y, x, b, max_iterations)
    _csr_diagonal(matrix)

    def row(i: int) -> tuple[float, float]:
        cols, values = matrix.row(i)
        off_diag = cols != i
        off_sum = float(values[off_diag] @ vx[cols[off_diag]])
        diag_values = values[~off_diag]
        return off_sum, float(diag_values[-1])

    return _gauss_seidel(row, vx, vb, max_iterations, tol)


def _conjugate_gradient(
    matvec: MatVec,
    residual: MatVec,
    x: Vector,
    max_iterations: int,
    tol: float,
) -> tuple[Vector, int]:
    r = residual(x)
    direction = r.copy()
    d_new = float(r @ r)
    limit = tol * tol * d_new
    k = 0
    while k < max_iterations and d_new > limit:
        q = matvec(direction)
        alpha = d_new / float(direction @ q)
        x = alpha * direction + x
        if k % _RESIDUAL_REFRESH == 0:
            r = residual(x)
        else:
            r = r - alpha * q
        d_old, d_new = d_new, float(r @ r)
        direction = (d_new / d_old) * direction + r
        k += 1
    return x, k


def conjugate_gradient_general(
    matrix: DenseMatrix, x, b, max_iterations: int = 1000, tol: float = 1e-6
) -> tuple[Vector, int]:
    """Solve a dense symmetric positive definite system by conjugate gradient.

    Stops once the squared residual norm falls to ``tol**2`` times its initial
    value; the residual is recomputed exactly every fifty iterations.
    """
    vx, vb = _prepare(matrix.dim_x, matrix.dim_y, x, b, max_iterations)
    data = matrix.data
    return _conjugate_gradient(
        lambda v: data @ v,
        lambda v: residual_general(matrix, v, vb),
        vx,
        max_iterations,
        tol,
    )


def conjugate_gradient_csr(
    matrix: CSRMatrix, x, b, max_iterations: int = 1000, tol: float = 1e-6
) -> tuple[Vector, int]:
    """Solve a CSR symmetric positive definite system by conjugate gradient."""
    vx, vb = _prepare(matrix.dim_x, matrix.dim_y, x, b, max_iterations)
    zeros = np.zeros(matrix.dim_x, dtype=np.float64)
    return _conjugate_gradient(
        lambda v: csr_mv(1.0, matrix, v, 0.0, zeros),
        lambda v: residual_csr(matrix, v, vb),
        vx,
        max_iterations,
        tol,
    )