import numpy as np
import pytest

from krylovlab.formats import csr_to_general, general_equal_csr
from krylovlab.poisson import laplacian_nnz, poisson_csr, poisson_general, to_matrix_id


def test_to_matrix_id_is_column_major_on_mesh():
    assert to_matrix_id(0, 0, 4) == 0
    assert to_matrix_id(1, 2, 4) == 9


@pytest.mark.parametrize("mesh_size", [1, 2, 3, 4, 7])
def test_nnz_formula_matches_built_matrix(mesh_size):
    matrix = poisson_csr(mesh_size)
    assert laplacian_nnz(mesh_size, mesh_size * mesh_size) == matrix.nnz()


@pytest.mark.parametrize("mesh_size", [1, 2, 3, 5])
def test_csr_and_general_agree(mesh_size):
    assert general_equal_csr(poisson_general(mesh_size), poisson_csr(mesh_size))


@pytest.mark.parametrize("mesh_size", [2, 4])
def test_general_is_symmetric_with_constant_diagonal(mesh_size):
    data = poisson_general(mesh_size).data
    assert data.shape == (mesh_size**2, mesh_size**2)
    assert np.array_equal(data, data.T)
    assert np.all(np.diag(data) == 4.0)


def test_row_sums_reflect_neighbour_count():
    data = poisson_general(4).data
    neighbours = np.count_nonzero(data, axis=1) - 1
    assert np.array_equal(data.sum(axis=1), 4.0 - neighbours)


def test_csr_columns_sorted_within_rows():
    matrix = poisson_csr(4)
    row_columns = [matrix.row(i)[0] for i in range(matrix.dim_x)]
    assert sum(len(cols) for cols in row_columns) == matrix.nnz()
    assert all(np.all(np.diff(cols) > 0) for cols in row_columns)


def test_csr_expands_to_general():
    assert np.array_equal(csr_to_general(poisson_csr(3)).data, poisson_general(3).data)


@pytest.mark.parametrize("builder", [poisson_csr, poisson_general])
def test_non_positive_mesh_rejected(builder):
    with pytest.raises(ValueError):
        builder(0)


def test_laplacian_nnz_rejects_non_positive():
    with pytest.raises(ValueError):
        laplacian_nnz(0, 4)
    with pytest.raises(ValueError):
        laplacian_nnz(2, 0)