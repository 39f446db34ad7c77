"""Convergence charts for a ConvergenceTable."""

from __future__ import annotations

from pathlib import Path

from quadbench.report import ConvergenceTable


def plot_convergence(
    table: ConvergenceTable,
    path: str | Path,
    reference: float | None = None,
) -> Path:
    """Save both estimates against the sample count as a PNG.

    Args:
        table: Table produced by ``build_convergence_table``.
        path: Output file. Parent directories are created.
        reference: Known value of the integral, drawn as a horizontal line.

    Returns:
        The path written.
    """
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    ns = [row.n for row in table.rows]
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(ns, [row.trapezoidal for row in table.rows], "o-", label="trapezoidal")
    ax.plot(ns, [row.monte_carlo for row in table.rows], "s--", label="Monte Carlo")
    if reference is not None:
        ax.axhline(reference, color="gray", linestyle=":", label="exact")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("N (samples)")
    ax.set_ylabel("estimate")
    ax.set_title(f"{table.name} on [{table.a:g}, {table.b:g}]")
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path
