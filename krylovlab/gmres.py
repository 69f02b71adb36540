"""Restart-free GMRES built on an Arnoldi process with modified Gram-Schmidt."""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from krylovlab.csr import CSRMatrix
from krylovlab.dense import DenseMatrix
from krylovlab.linalg import csr_mv, general_mv
from krylovlab.solvers import residual_csr, residual_general

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


def arnoldi_step(matvec: MatVec, q: np.ndarray, h: np.ndarray, k: int) -> float:
    """Extend the Krylov basis ``q`` by column ``k`` and fill column ``k - 1`` of ``h``.

    ``q`` and ``h`` are updated in place; the norm stored in ``h[k, k - 1]`` is
    returned. A zero norm leaves the new basis column unnormalised (all zeros).
    """
    if not 1 <= k < q.shape[1]:
        raise ValueError(f"step {k} out of range for a basis of {q.shape[1]} columns")
    if h.shape[0] <= k or h.shape[1] < k:
        raise ValueError("the Hessenberg matrix is too small for this step")

    w = np.array(matvec(q[:, k - 1]), dtype=np.float64)
    for j in range(k):
        coefficient = float(q[:, j] @ w)
        h[j, k - 1] = coefficient
        w -= coefficient * q[:, j]

    norm = math.sqrt(float(w @ w))
    h[k, k - 1] = norm
    q[:, k] = w / norm if norm != 0.0 else w
    return norm


def _gmres(
    matvec: MatVec,
    residual: MatVec,
    x: Vector,
    max_iterations: int,
    tol: float,
) -> tuple[Vector, int]:
    r = residual(x)
    beta = math.sqrt(float(r @ r))
    if beta == 0.0:
        return x, 0

    size = max(max_iterations, 1)
    q = np.zeros((x.size, size + 1), dtype=np.float64)
    h = np.zeros((size + 1, size), dtype=np.float64)
    q[:, 0] = r / beta

    y = np.zeros(0, dtype=np.float64)
    k = 1
    while k < max_iterations:
        arnoldi_step(matvec, q, h, k)
        g = np.zeros(k + 1, dtype=np.float64)
        g[0] = beta
        y, *_ = np.linalg.lstsq(h[: k + 1, :k], g, rcond=None)

        candidate = x + q[:, :k] @ y
        r = residual(candidate)
        if math.sqrt(float(r @ r)) < tol:
            break
        k += 1

    return x + q[:, : y.size] @ y, k


def gmres_general(
    matrix: DenseMatrix, x, b, max_iterations: int = 1000, tol: float = 1e-6
) -> tuple[Vector, int]:
    """Solve a dense system by GMRES.

    ``max_iterations`` bounds the Krylov subspace dimension. Returns the
    solution and the dimension reached when the residual norm fell below
    ``tol`` (or ``max_iterations``).
    """
    vx, vb = _prepare(matrix.dim_x, matrix.dim_y, x, b, max_iterations)
    zeros = np.zeros(matrix.dim_x, dtype=np.float64)
    return _gmres(
        lambda v: general_mv(1.0, matrix, v, 0.0, zeros),
        lambda v: residual_general(matrix, v, vb),
        vx,
        max_iterations,
        tol,
    )


def gmres_csr(
    matrix: CSRMatrix, x, b, max_iterations: int = 1000, tol: float = 1e-6
) -> tuple[Vector, int]:
    """Solve a CSR system by GMRES; same contract as :func:`gmres_general`."""
    vx, vb = _prepare(matrix.dim_x, matrix.dim_y, x, b, max_iterations)
    zeros = np.zeros(matrix.dim_x, dtype=np.float64)
    return _gmres(
        lambda v: csr_mv(1.0, matrix, v, 0.0, zeros),
        lambda v: residual_csr(matrix, v, vb),
        vx,
        max_iterations,
        tol,
    )