"""Dense vector helpers built on one-dimensional float arrays."""

from __future__ import annotations

from typing import Iterable

import numpy as np


def _as_vector(values: Iterable[float] | np.ndarray) -> np.ndarray:
    vector = np.asarray(values, dtype=np.float64)
    if vector.ndim != 1:
        raise ValueError("expected a one-dimensional vector")
    return vector


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError("vector size must be positive")


def _pair(a, b) -> tuple[np.ndarray, np.ndarray]:
    va, vb = _as_vector(a), _as_vector(b)
    if va.shape != vb.shape:
        raise ValueError(f"vector sizes differ: {va.size} and {vb.size}")
    return va, vb


def iota_vector(size: int, begin: float = 0.0) -> np.ndarray:
    """Return ``[begin, begin + 1, ..., begin + size - 1]``."""
    _check_size(size)
    return begin + np.arange(size, dtype=np.float64)


def random_vector(
    size: int,
    low: float,
    high: float,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Return ``size`` values drawn uniformly between ``low`` and ``high``."""
    _check_size(size)
    if not low < high:
        raise ValueError("low must be strictly smaller than high")
    generator = rng if rng is not None else np.random.default_rng()
    return generator.uniform(low, high, size)


def constant_vector(size: int, value: float) -> np.ndarray:
    """Return a vector of ``size`` copies of ``value``."""
    _check_size(size)
    return np.full(size, value, dtype=np.float64)


def dot_product(a, b) -> float:
    """Return the inner product of two vectors of the same size."""
    va, vb = _pair(a, b)
    return float(np.dot(va, vb))


def add_vector(a, b) -> np.ndarray:
    """Return the element-wise sum ``a + b``."""
    va, vb = _pair(a, b)
    return va + vb


def mul_vector(a, b) -> np.ndarray:
    """Return the element-wise product ``a * b``."""
    va, vb = _pair(a, b)
    return va * vb


def add_scalar_vector(scalar: float, a) -> np.ndarray:
    """Return ``scalar + a`` element-wise."""
    return scalar + _as_vector(a)


def mul_scalar_vector(scalar: float, a) -> np.ndarray:
    """Return ``scalar * a`` element-wise."""
    return scalar * _as_vector(a)


def daxpy(scalar: float, a, b) -> np.ndarray:
    """Return ``scalar * a + b``."""
    va, vb = _pair(a, b)
    return scalar * va + vb


def equal_vector(a, b) -> bool:
    """Return True when both vectors have the same size and identical entries."""
    va, vb = _as_vector(a), _as_vector(b)
    if va.shape != vb.shape:
        return False
    return bool(np.all(va == vb))


def allclose_vector(a, b, atol: float = 1e-8, rtol: float = 1e-5) -> bool:
    """Return True when ``|a - b| <= atol + rtol * |b|`` holds for every entry."""
    va, vb = _as_vector(a), _as_vector(b)
    if va.shape != vb.shape:
        return False
    lhs = np.abs(va - vb)
    rhs = atol + rtol * np.abs(vb)
    return not bool(np.any(lhs > rhs))


def format_vector(vector) -> str:
    """Render a vector as space-separated values with three decimals."""
    return " ".join(f"{value:2.3f}" for value in _as_vector(vector))