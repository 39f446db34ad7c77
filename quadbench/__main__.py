"""Print the Gaussian and Sinusoid convergence tables.

Run:
    python -m quadbench
"""

from __future__ import annotations

import logging
import sys

from quadbench.errors import IntegrationError
from quadbench.integrands import DEMO_INTEGRANDS
from quadbench.report import build_convergence_table, format_table

logger = logging.getLogger(__name__)


def main() -> int:
    """Print one table per demo integrand; return the process exit code."""
    status = 0
    printed = False
    for integrand in DEMO_INTEGRANDS:
        try:
            table = build_convergence_table(integrand.func, integrand.a, integrand.b, integrand.name)
        except IntegrationError as exc:
            logger.error("Convergence table for %s failed: %s", integrand.name, exc)
            print(f"Integration failed: {exc}", file=sys.stderr)
            status = 1
            continue

        # Blank line between tables only.
        if printed:
            print()
        print(format_table(table))
        printed = True
    return status


if __name__ == "__main__":
    sys.exit(main())
