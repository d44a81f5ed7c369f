"""Smoke tests for the benchmark entry point."""

import main


def test_run_benchmark_small():
    means = main.run_benchmark(degree=3, seed=1)
    assert set(means) == {"lagrange_create", "lagrange_eval", "lagrange_add",
                          "newton_create", "newton_eval", "newton_add"}
    assert all(v >= 0 for v in means.values())

def test_print_report(capsys):
    means = {name: 1_000.0 for name in (
        "lagrange_create", "lagrange_eval", "lagrange_add",
        "newton_create", "newton_eval", "newton_add")}
    main.print_report(4, means)
    out = capsys.readouterr().out
    assert "Degree 4 (5 points)" in out
    assert "1.00 us" in out
    assert "1.00" in out
