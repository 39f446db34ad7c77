"""Convergence charts for the demo integrands.

Builds the Gaussian and Sinusoid tables with a fixed seed, prints them,
and saves one chart per integrand.

Run:
    python examples/convergence_plots.py

Output:
    output/convergence/<integrand>.png
"""

from __future__ import annotations

import math
from pathlib import Path

import quadbench
from quadbench.visual import plot_convergence

OUTPUT_DIR = Path("output/convergence")

# Only the Gaussian has a closed form over its demo interval.
EXACT = {"Gaussian": math.sqrt(math.pi)}


def main() -> None:
    quadbench.enable_console_logging(level="INFO")
    config = quadbench.ReportConfig(seed=42)

    for integrand in quadbench.DEMO_INTEGRANDS:
        table = quadbench.print_table(
            integrand.func, integrand.a, integrand.b, integrand.name, config
        )
        path = plot_convergence(
            table, OUTPUT_DIR / f"{integrand.name.lower()}.png", EXACT.get(integrand.name)
        )
        print(f"Saved: {path}\n")


if __name__ == "__main__":
    main()
