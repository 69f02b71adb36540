# krylovlab

A small toolkit for experimenting with iterative linear solvers on the
five-point 2D Poisson Laplacian, in dense and compressed sparse row (CSR)
storage.

## What it contains

- `krylovlab.vectors`: vectors as one-dimensional NumPy float arrays.
  `constant_vector`, `iota_vector` and `random_vector` (uniform between `low`
  and `high`, with an optional `numpy.random.Generator`) build them;
  `dot_product`, `add_vector`, `mul_vector`, `add_scalar_vector`,
  `mul_scalar_vector` and `daxpy` (`scalar * a + b`) return new arrays;
  `equal_vector` compares exactly, `allclose_vector` checks
  `|a - b| <= atol + rtol * |b|` for every entry; `format_vector` renders
  values with three decimals. Mismatched sizes raise `ValueError` in the
  arithmetic functions and give `False` in the comparisons.
- `krylovlab.dense.DenseMatrix`: a dense 2D matrix (`dim_x`, `dim_y`,
  `size`), with `DenseMatrix.filled(dim_x, dim_y, value)`, `fill(value)` and
  `format()` / `str()`, which prints zeros as `__.___`.
- `krylovlab.csr.CSRMatrix(dim_x, dim_y, row_index, col_index, data)`: a
  validated CSR matrix with `nnz()`, `row(i)` (the column indices and values
  of row `i`) and a dense-looking `format()`.
- `krylovlab.csc.CSCMatrix(dim_x, dim_y, row_index, col_index, data)`: the
  column-compressed counterpart, with `nnz()` and `format()`.
- `krylovlab.formats`: `nnz_in_general`, the copies `csr_to_csr` and
  `general_to_general`, the conversions `general_to_csr` and
  `csr_to_general`, and the checks `csr_equal_csr`, `general_equal_csr` and
  `general_equal_general`.
- `krylovlab.poisson`: `poisson_csr(mesh_size)` and
  `poisson_general(mesh_size)` build the `mesh_size**2` square Laplacian
  (4 on the diagonal, -1 for each mesh neighbour); `to_matrix_id(i, j, n)`
  maps a mesh point to its row and `laplacian_nnz(mesh_size, matrix_size)`
  gives the non-zero count.
- `krylovlab.linalg`: `general_mv(alpha, a, x, beta, b)` and
  `csr_mv(alpha, a, x, beta, b)` return `alpha * A @ x + beta * b`.
- `krylovlab.solvers`: `residual_general` and `residual_csr` (`b - A @ x`),
  and `jacobi_*`, `gauss_seidel_*` and `conjugate_gradient_*` in `general`
  (dense) and `csr` variants.
- `krylovlab.gmres`: `gmres_general` and `gmres_csr`, plus the
  `arnoldi_step(matvec, q, h, k)` building block (modified Gram-Schmidt,
  updating `q` and `h` in place).
- `krylovlab.matrix_market`: `parse_matrix_market_csr(lines)` and
  `load_matrix_market_csr(path)` read a coordinate Matrix Market document
  into a `CSRMatrix`.
- `krylovlab.chrono`: `Chrono`, a stopwatch on a nanosecond monotonic clock,
  usable as a context manager, and `Duration` with `as_seconds()`,
  `as_milliseconds()`, `as_microseconds()` and `as_nanoseconds()`.

## Installation

```
pip install .
```

Python 3.10 or later and NumPy are required.

## Command line

```
krylovlab [<mesh_size> <nb_iter>]
```

Builds the Poisson matrix for the given mesh (default 4), draws a random
right-hand side between 1e-5 and 1e7, and solves the system with Jacobi,
Gauss-Seidel, conjugate gradient and GMRES, each in dense and in CSR form,
starting from zero, with at most `nb_iter` iterations (default 1000) and a
tolerance of 1e-6. For each method it prints whether the two forms gave
exactly the same vector and how many iterations each took. Giving one
argument, more than two, non-integers, a mesh size below 1 or a negative
iteration count prints the usage to standard error and exits with status 1.

The same run is available as a function, `krylovlab.cli.run_comparison(
mesh_size, iterations, tol, rng, out)`, which writes the report to `out`
(standard output by default) and returns one `Comparison` (`name`, `equal`,
`general_iterations`, `csr_iterations`) per method.

## Solving a system

Every solver takes `(matrix, x, b, max_iterations=1000, tol=1e-6)`, leaves
the `x` it was given untouched, and returns a pair: the solution and the
iteration count.

```python
import numpy as np

from krylovlab.poisson import poisson_csr, poisson_general
from krylovlab.solvers import conjugate_gradient_csr, conjugate_gradient_general
from krylovlab.vectors import allclose_vector

csr = poisson_csr(8)
dense = poisson_general(8)
b = np.ones(64)

x_csr, iterations = conjugate_gradient_csr(csr, np.zeros(64), b, 1000, 1e-10)
x_dense, _ = conjugate_gradient_general(dense, np.zeros(64), b, 1000, 1e-10)

print(iterations, allclose_vector(x_csr, x_dense, 1e-8, 1e-5))
```

How each method stops:

- Jacobi stops when two successive iterates differ by less than `tol` in
  Euclidean norm and returns the older of the two with the sweep number.
- Gauss-Seidel stops when one sweep changes `x` by less than `tol` and
  returns that sweep's number, or `max_iterations` if none did.
- Conjugate gradient stops when the squared residual norm reaches
  `tol**2` times its starting value; the residual is recomputed exactly
  every fifty iterations. It expects a symmetric positive definite matrix.
- GMRES grows the Krylov subspace one dimension per step (no restarts),
  solves the small least-squares problem with `numpy.linalg.lstsq`, and
  stops when the true residual norm falls below `tol`; `max_iterations`
  bounds the subspace dimension.

Jacobi and Gauss-Seidel raise `ValueError` if the matrix has a zero on its
diagonal; all solvers raise `ValueError` for a non-square matrix or vectors
of the wrong size.

## Reading a Matrix Market file

```python
from krylovlab.matrix_market import load_matrix_market_csr

matrix = load_matrix_market_csr("system.mtx")
print(matrix)
```

Lines starting with `%` (the banner included) and blank lines are skipped.
The first remaining line gives rows, columns and the entry count; each
following line is a 1-based `row column value` triple. A wrong entry count,
a malformed line or an index out of range raises `ValueError`.

## Timing

```python
from krylovlab.chrono import Chrono

with Chrono() as chrono:
    ...
print(chrono.elapsed().as_milliseconds())
```

## What it does not do

- The Matrix Market reader reads the coordinate layout only: it does not
  interpret the banner, so symmetric files are not mirrored, and dense
  (array) files are not supported.
- `CSCMatrix` is storage and printing only: there is no Poisson builder,
  conversion, comparison, product or solver for it.
- Everything runs in one process; there is no parallel or distributed
  solving.

## Running the tests

```
pip install .[test]
pytest
```