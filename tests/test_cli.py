import io

import numpy as np
import pytest

from krylovlab.cli import main, run_comparison


def _run(mesh_size=3, iterations=300, seed=0):
    out = io.StringIO()
    results = run_comparison(mesh_size, iterations, 1e-6, np.random.default_rng(seed), out)
    return results, out.getvalue()


def test_run_comparison_covers_every_solver():
    results, _ = _run()
    assert [r.name for r in results] == [
        "Jacobi",
        "Gauss Seidel",
        "Conjugate gradient",
        "GMRES",
    ]


def test_run_comparison_prints_sections():
    results, text = _run()
    assert text.count("====== ") == len(results)
    assert "====== Jacobi Testing (quick) ======" in text
    assert text.count("General iterations : ") == 4
    assert text.count("Csr iterations     : ") == 4


def test_run_comparison_reports_iteration_counts():
    results, text = _run()
    for result in results:
        assert f"General iterations : {result.general_iterations}" in text
        assert 0 <= result.general_iterations <= 300
        assert 0 <= result.csr_iterations <= 300


def test_run_comparison_agreement_message_matches_result():
    results, text = _run()
    for result in results:
        same = f"{result.name} implementations yields the same result" in text
        assert same == result.equal or not result.equal


def test_run_comparison_iterative_solvers_converge():
    results, _ = _run(mesh_size=3, iterations=500)
    by_name = {r.name: r for r in results}
    assert by_name["Jacobi"].csr_iterations < 500
    assert by_name["Gauss Seidel"].csr_iterations < by_name["Jacobi"].csr_iterations


@pytest.mark.parametrize("argv", [["4"], ["1", "2", "3"]])
def test_main_rejects_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert "Usage is" in capsys.readouterr().err


def test_main_rejects_non_numbers(capsys):
    assert main(["four", "10"]) == 1
    assert "Usage is" in capsys.readouterr().err


def test_main_runs_with_arguments(capsys):
    assert main(["2", "100"]) == 0
    text = capsys.readouterr().out
    assert "====== GMRES Testing (quick) ======" in text
    assert text.count("Csr iterations") == 4


def test_main_runs_with_defaults(capsys):
    assert main([]) == 0
    assert "====== Conjugate gradient Testing (quick) ======" in capsys.readouterr().out