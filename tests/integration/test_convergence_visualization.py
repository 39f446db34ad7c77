"""Visual convergence checks.

Builds both demo tables with a fixed seed, saves CSV data and a chart per
integrand under test_output/, and checks the trends the charts should show.

Run:
    pytest tests/integration/test_convergence_visualization.py -v

Output:
    test_output/test_convergence_visualization/<test_name>/...
"""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from quadbench.integrands import DEMO_INTEGRANDS
from quadbench.report import ReportConfig, build_convergence_table
from quadbench.visual import plot_convergence

EXACT = {"Gaussian": math.sqrt(math.pi), "Sinusoid": None}


@pytest.mark.parametrize("integrand", DEMO_INTEGRANDS, ids=lambda i: i.name)
def test_convergence_chart(integrand, test_output_dir: Path):
    pytest.importorskip("matplotlib")

    table = build_convergence_table(
        integrand.func, integrand.a, integrand.b, integrand.name, ReportConfig(seed=7)
    )

    table.to_dataframe().to_csv(test_output_dir / "convergence.csv", index=False)
    path = plot_convergence(table, test_output_dir / "convergence.png", EXACT[integrand.name])

    assert path.exists()
    assert path.stat().st_size > 0

    estimates = [v for row in table.rows for v in (row.trapezoidal, row.monte_carlo)]
    assert all(math.isfinite(v) and v >= 0.0 for v in estimates)


def test_gaussian_trapezoid_beats_monte_carlo_at_large_n():
    gaussian = DEMO_INTEGRANDS[0]
    table = build_convergence_table(
        gaussian.func, gaussian.a, gaussian.b, gaussian.name, ReportConfig(seed=11)
    )
    last = table.rows[-1]
    exact = math.sqrt(math.pi)
    assert abs(last.trapezoidal - exact) < abs(last.monte_carlo - exact)
