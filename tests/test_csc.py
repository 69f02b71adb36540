import numpy as np
import pytest

from krylovlab.csc import CSCMatrix
from krylovlab.dense import DenseMatrix


def _diagonal_csc() -> CSCMatrix:
    return CSCMatrix(2, 2, row_index=[0, 1], col_index=[0, 1, 2], data=[1.0, 2.0])


def test_nnz_counts_stored_entries():
    matrix = CSCMatrix(3, 2, row_index=[0, 2, 1], col_index=[0, 2, 3], data=[1.0, 5.0, 7.0])
    assert matrix.nnz() == 3
    assert matrix.size == 6


def test_format_matches_dense_rendering():
    matrix = CSCMatrix(3, 2, row_index=[0, 2, 1], col_index=[0, 2, 3], data=[1.0, 5.0, 7.0])
    dense = DenseMatrix(np.array([[1.0, 0.0], [0.0, 7.0], [5.0, 0.0]]))
    assert matrix.format() == dense.format()


def test_str_is_format():
    matrix = _diagonal_csc()
    assert str(matrix) == matrix.format()


def test_format_uses_placeholder_for_absent_entries():
    text = _diagonal_csc().format()
    lines = text.splitlines()
    assert len(lines) == 2
    assert lines[0].split()[1] == "__.___"
    assert lines[1].split()[0] == "__.___"


def test_empty_column_is_allowed():
    matrix = CSCMatrix(2, 3, row_index=[1], col_index=[0, 0, 1, 1], data=[4.0])
    assert matrix.nnz() == 1
    assert all(cell == "__.___" for cell in matrix.format().splitlines()[0].split())


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(dim_x=0, dim_y=2, row_index=[], col_index=[0, 0, 0], data=[]),
        dict(dim_x=2, dim_y=2, row_index=[0], col_index=[0, 1], data=[1.0]),
        dict(dim_x=2, dim_y=2, row_index=[0, 1], col_index=[0, 1, 2], data=[1.0]),
        dict(dim_x=2, dim_y=2, row_index=[0, 5], col_index=[0, 1, 2], data=[1.0, 2.0]),
        dict(dim_x=2, dim_y=2, row_index=[0, 1], col_index=[1, 1, 2], data=[1.0, 2.0]),
        dict(dim_x=2, dim_y=2, row_index=[0, 1], col_index=[0, 2, 1], data=[1.0, 2.0]),
    ],
)
def test_invalid_structure_is_rejected(kwargs):
    with pytest.raises(ValueError):
        CSCMatrix(**kwargs)