[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "krylovlab"
version = "0.1.0"
description = "Dense, CSR and CSC matrices, a 2D Poisson Laplacian builder, and Jacobi, Gauss-Seidel, conjugate gradient and GMRES solvers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "linear-algebra",
    "sparse",
    "csr",
    "csc",
    "matrix-market",
    "iterative-solvers",
    "conjugate-gradient",
    "gmres",
    "jacobi",
    "gauss-seidel",
    "poisson",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
krylovlab = "krylovlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["krylovlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
