"""Numerical integration estimators.

Two independent, stateless estimators of a one-dimensional definite
integral:
- Composite trapezoidal rule (deterministic)
- Plain Monte Carlo sampling (stochastic, optionally seeded)
"""

from quadbench.numerics.monte_carlo import SAMPLING_EPSILON, integrate_monte_carlo
from quadbench.numerics.trapezoid import integrate_trapezoid

__all__ = [
    "SAMPLING_EPSILON",
    "integrate_monte_carlo",
    "integrate_trapezoid",
]
