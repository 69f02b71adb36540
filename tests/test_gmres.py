import numpy as np
import pytest

from krylovlab.dense import DenseMatrix
from krylovlab.gmres import arnoldi_step, gmres_csr, gmres_general
from krylovlab.poisson import poisson_csr, poisson_general


def _system(mesh_size=3, seed=1):
    rng = np.random.default_rng(seed)
    n = mesh_size * mesh_size
    return poisson_general(mesh_size), poisson_csr(mesh_size), rng.uniform(1.0, 10.0, n)


def test_gmres_general_solves_poisson():
    dense, _, b = _system()
    x, k = gmres_general(dense, np.zeros(b.size), b, 100, 1e-10)
    assert np.allclose(x, np.linalg.solve(dense.data, b), atol=1e-8)
    assert 1 <= k <= b.size + 1


def test_gmres_csr_solves_poisson():
    dense, csr, b = _system()
    x, k = gmres_csr(csr, np.zeros(b.size), b, 100, 1e-10)
    assert np.allclose(x, np.linalg.solve(dense.data, b), atol=1e-8)
    assert k < 100


def test_gmres_formats_agree():
    dense, csr, b = _system(mesh_size=4, seed=7)
    x_dense, k_dense = gmres_general(dense, np.zeros(b.size), b, 200, 1e-9)
    x_csr, k_csr = gmres_csr(csr, np.zeros(b.size), b, 200, 1e-9)
    assert k_dense == k_csr
    assert np.allclose(x_dense, x_csr, atol=1e-9)


def test_gmres_uses_initial_guess():
    dense, csr, b = _system(seed=3)
    guess = np.full(b.size, 0.5)
    x, _ = gmres_csr(csr, guess, b, 100, 1e-10)
    assert np.allclose(dense.data @ x, b, atol=1e-8)
    x_general, _ = gmres_general(dense, guess, b, 100, 1e-10)
    assert np.allclose(dense.data @ x_general, b, atol=1e-8)


def test_gmres_does_not_modify_input():
    dense, _, b = _system()
    guess = np.zeros(b.size)
    x, _ = gmres_general(dense, guess, b, 50, 1e-8)
    assert np.allclose(dense.data @ x, b, atol=1e-6)
    assert np.all(guess == 0.0)


def test_gmres_zero_residual_returns_guess():
    dense, _, b = _system()
    exact = np.linalg.solve(dense.data, b)
    x, k = gmres_general(dense, exact, dense.data @ exact, 50, 1e-8)
    assert k == 0
    assert np.array_equal(x, exact)


def test_gmres_single_iteration_keeps_guess():
    _, csr, b = _system()
    guess = np.ones(b.size)
    x, k = gmres_csr(csr, guess, b, 1, 1e-8)
    assert k == 1
    assert np.array_equal(x, guess)


def test_gmres_reports_limit_when_not_converged():
    dense, _, b = _system(mesh_size=4)
    x, k = gmres_general(dense, np.zeros(b.size), b, 3, 1e-14)
    assert k == 3
    r_start = np.linalg.norm(b)
    assert np.linalg.norm(b - dense.data @ x) < r_start


def test_gmres_rejects_bad_input():
    dense, csr, b = _system()
    with pytest.raises(ValueError):
        gmres_general(dense, np.zeros(b.size), b, -1, 1e-6)
    with pytest.raises(ValueError):
        gmres_csr(csr, np.zeros(b.size + 1), b, 10, 1e-6)
    rect = DenseMatrix(np.ones((2, 3)))
    with pytest.raises(ValueError):
        gmres_general(rect, np.zeros(3), np.ones(2), 10, 1e-6)


def test_arnoldi_builds_orthonormal_basis():
    a = poisson_general(3).data
    rng = np.random.default_rng(11)
    start = rng.uniform(-1.0, 1.0, 9)
    q = np.zeros((9, 5))
    h = np.zeros((5, 4))
    q[:, 0] = start / np.linalg.norm(start)
    for k in range(1, 5):
        arnoldi_step(lambda v: a @ v, q, h, k)
    assert np.allclose(q.T @ q, np.eye(5), atol=1e-10)
    assert np.allclose(a @ q[:, :4], q @ h, atol=1e-10)
    assert np.allclose(np.tril(h, -2), 0.0)


def test_arnoldi_returns_subdiagonal_norm():
    a = poisson_general(2).data
    q = np.zeros((4, 3))
    h = np.zeros((3, 2))
    q[:, 0] = np.array([1.0, 0.0, 0.0, 0.0])
    norm = arnoldi_step(lambda v: a @ v, q, h, 1)
    assert norm == h[1, 0]
    assert h[0, 0] == pytest.approx(4.0)
    assert np.linalg.norm(q[:, 1]) == pytest.approx(1.0)


def test_arnoldi_rejects_bad_step():
    q = np.zeros((4, 3))
    h = np.zeros((3, 2))
    with pytest.raises(ValueError):
        arnoldi_step(lambda v: v, q, h, 0)
    with pytest.raises(ValueError):
        arnoldi_step(lambda v: v, q, h, 3)