"""Convergence report comparing the trapezoidal and Monte Carlo estimators.

The driver runs both estimators over a doubling sequence of sample counts
(8, 16, ..., 1024 by default) and prints one row per count:

    Integrating Gaussian for a = -5 b = 5
               N ,    Trapezoidal ,    Monte Carlo
           N = 8 ,   <trapezoid> ,   <monte carlo>
    ...
"""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

import pandas as pd

from quadbench.errors import IntegrationError
from quadbench.numerics.monte_carlo import METHOD as MONTE_CARLO
from quadbench.numerics.monte_carlo import integrate_monte_carlo
from quadbench.numerics.trapezoid import METHOD as TRAPEZOIDAL
from quadbench.numerics.trapezoid import integrate_trapezoid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportConfig:
    """Sample-count schedule for a convergence table.

    Attributes:
        start_n: First sample count.
        max_n: Last sample count (inclusive if reached by the schedule).
        growth: Integer factor between consecutive counts.
        seed: Master seed for the Monte Carlo column. None draws fresh
            entropy for every row.
    """

    start_n: int = 8
    max_n: int = 1024
    growth: int = 2
    seed: int | None = None

    def __post_init__(self):
        for name in ("start_n", "max_n", "growth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
        if self.start_n < 1:
            raise ValueError(f"start_n must be >= 1, got {self.start_n}")
        if self.max_n < self.start_n:
            raise ValueError(f"max_n ({self.max_n}) must be >= start_n ({self.start_n})")
        if self.growth < 2:
            raise ValueError(f"growth must be >= 2, got {self.growth}")

    def sample_counts(self) -> Iterator[int]:
        n = self.start_n
        while n <= self.max_n:
            yield n
            n *= self.growth


@dataclass(frozen=True)
class ConvergenceRow:
    n: int
    trapezoidal: float
    monte_carlo: float


@dataclass(frozen=True)
class ConvergenceTable:
    """Both estimates for every sample count of one integrand."""

    name: str
    a: float
    b: float
    rows: tuple[ConvergenceRow, ...] = field(default_factory=tuple)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [(row.n, row.trapezoidal, row.monte_carlo) for row in self.rows],
            columns=["n", "trapezoidal", "monte_carlo"],
        )


def _estimate(method: str, estimator: Callable[[], float], name: str, n: int) -> float:
    try:
        return estimator()
    except (IntegrationError, ValueError, TypeError) as exc:
        raise IntegrationError(
            f"{name}: {method} estimate failed at N={n}: {exc}",
            method=method,
            function_name=name,
            n=n,
        ) from exc


def build_convergence_table(
    f: Callable[[float], float],
    a: float,
    b: float,
    name: str,
    config: ReportConfig | None = None,
) -> ConvergenceTable:
    """Run both estimators for every sample count in ``config``.

    Raises:
        IntegrationError: If either estimator fails for any row. The error
            names the integrand, the sample count and the method, and
            chains the original exception.
    """
    config = config or ReportConfig()
    seeder = random.Random(config.seed) if config.seed is not None else None

    rows = []
    for n in config.sample_counts():
        row_seed = seeder.randint(0, 2**31) if seeder is not None else None
        trap = _estimate(TRAPEZOIDAL, lambda: integrate_trapezoid(f, a, b, n), name, n)
        mc = _estimate(
            MONTE_CARLO, lambda: integrate_monte_carlo(f, a, b, n, seed=row_seed), name, n
        )
        rows.append(ConvergenceRow(n=n, trapezoidal=trap, monte_carlo=mc))

    logger.info("Built convergence table for %s over [%g, %g] with %d rows", name, a, b, len(rows))
    return ConvergenceTable(name=name, a=a, b=b, rows=tuple(rows))


def format_table(table: ConvergenceTable) -> str:
    lines = [
        f"Integrating {table.name} for a = {table.a:g} b = {table.b:g}",
        f"{'N':>12} , {'Trapezoidal':>14} , {'Monte Carlo':>14}",
    ]
    for row in table.rows:
        lines.append(f"{f'N = {row.n}':>12} , {row.trapezoidal:>14.10f} , {row.monte_carlo:>14.10f}")
    return "\n".join(lines)


def print_table(
    f: Callable[[float], float],
    a: float,
    b: float,
    name: str,
    config: ReportConfig | None = None,
    stream: TextIO | None = None,
) -> ConvergenceTable:
    """Build the convergence table for ``f`` and write it to ``stream`` (stdout)."""
    table = build_convergence_table(f, a, b, name, config)
    stream = stream if stream is not None else sys.stdout
    print(format_table(table), file=stream)
    return table
