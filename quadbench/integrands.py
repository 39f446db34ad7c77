"""Test integrands for the convergence report.

Two fixed functions are provided:

- ``gaussian``: exp(-x^2), smooth and rapidly decaying. Over [-5, 5] its
  integral is sqrt(pi) to about 1e-12.
- ``sinusoid``: sin(1 / (x(2 - x) + eps))^2. The argument blows up at x = 0
  and x = 2, so the function oscillates without bound near both ends of
  [0, 2]. The trapezoidal rule under-resolves it at small n and Monte Carlo
  sees a large variance.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

Integrand = Callable[[float], float]

# Keeps x(2 - x) off zero at the endpoints of [0, 2].
SINGULARITY_EPSILON = 1e-12


def gaussian(x: float) -> float:
    return math.exp(-x * x)


def make_sinusoid(epsilon: float = SINGULARITY_EPSILON) -> Integrand:
    """Build sin(1 / (x(2 - x) + epsilon))^2 with a custom guard.

    ``epsilon=0`` reproduces the unguarded function, which raises
    ZeroDivisionError at x = 0 and x = 2.
    """

    def sinusoid(x: float) -> float:
        s = math.sin(1.0 / (x * (2.0 - x) + epsilon))
        return s * s

    return sinusoid


sinusoid = make_sinusoid()


@dataclass(frozen=True)
class NamedIntegrand:
    """An integrand together with its display name and report bounds."""

    name: str
    func: Integrand
    a: float
    b: float

    def __call__(self, x: float) -> float:
        return self.func(x)


DEMO_INTEGRANDS: tuple[NamedIntegrand, ...] = (
    NamedIntegrand("Gaussian", gaussian, -5.0, 5.0),
    NamedIntegrand("Sinusoid", sinusoid, 0.0, 2.0),
)
