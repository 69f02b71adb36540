"""Command that solves a Poisson system with every solver in both storage formats."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO

import numpy as np

from krylovlab.gmres import gmres_csr, gmres_general
from krylovlab.poisson import poisson_csr, poisson_general
from krylovlab.solvers import (
    conjugate_gradient_csr,
    conjugate_gradient_general,
    gauss_seidel_csr,
    gauss_seidel_general,
    jacobi_csr,
    jacobi_general,
)
from krylovlab.vectors import constant_vector, equal_vector, random_vector

DEFAULT_MESH_SIZE = 4
DEFAULT_ITERATIONS = 1000
DEFAULT_TOL = 1e-6
_TARGET_LOW = 10e-6
_TARGET_HIGH = 10e6


@dataclass(frozen=True)
class Comparison:
    """Outcome of running one solver on both storage formats."""

    name: str
    equal: bool
    general_iterations: int
    csr_iterations: int


_SOLVERS: list[tuple[str, Callable, Callable]] = [
    ("Jacobi", jacobi_general, jacobi_csr),
    ("Gauss Seidel", gauss_seidel_general, gauss_seidel_csr),
    ("Conjugate gradient", conjugate_gradient_general, conjugate_gradient_csr),
    ("GMRES", gmres_general, gmres_csr),
]


def run_comparison(
    mesh_size: int = DEFAULT_MESH_SIZE,
    iterations: int = DEFAULT_ITERATIONS,
    tol: float = DEFAULT_TOL,
    rng: np.random.Generator | None = None,
    out: TextIO | None = None,
) -> list[Comparison]:
    """Solve a random Poisson system with each solver and report whether formats agree."""
    stream = out if out is not None else sys.stdout
    n = mesh_size * mesh_size
    csr = poisson_csr(mesh_size)
    general = poisson_general(mesh_size)
    b = random_vector(n, _TARGET_LOW, _TARGET_HIGH, rng)

    results = []
    for name, solve_general, solve_csr in _SOLVERS:
        print(f"====== {name} Testing (quick) ======", file=stream)
        x_general, general_iterations = solve_general(
            general, constant_vector(n, 0.0), b, iterations, tol
        )
        x_csr, csr_iterations = solve_csr(csr, constant_vector(n, 0.0), b, iterations, tol)
        equal = equal_vector(x_general, x_csr)
        if equal:
            print(f"{name} implementations yields the same result", file=stream)
        else:
            print("The two implementations yields different results", file=stream)
        print(f"General iterations : {general_iterations}", file=stream)
        print(f"Csr iterations     : {csr_iterations}", file=stream)
        print(file=stream)
        results.append(Comparison(name, equal, general_iterations, csr_iterations))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run the comparison; arguments are either none or ``<mesh_size> <nb_iter>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    usage = "Usage is krylovlab <mesh_size> <nb_iter>"
    if len(args) not in (0, 2):
        print(usage, file=sys.stderr)
        return 1

    mesh_size, iterations = DEFAULT_MESH_SIZE, DEFAULT_ITERATIONS
    if args:
        try:
            mesh_size, iterations = int(args[0]), int(args[1])
        except ValueError:
            print(usage, file=sys.stderr)
            return 1
        if mesh_size <= 0 or iterations < 0:
            print(usage, file=sys.stderr)
            return 1

    run_comparison(mesh_size, iterations, DEFAULT_TOL)
    return 0


if __name__ == "__main__":
    sys.exit(main())