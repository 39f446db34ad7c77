"""Composite trapezoidal rule.

Each slab contributes the average of its two endpoint values times its
width, so interior nodes are counted twice and the endpoints once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from quadbench.numerics._checks import (
    check_result,
    evaluate,
    validate_bounds,
    validate_sample_count,
)

logger = logging.getLogger(__name__)

METHOD = "trapezoidal"


def integrate_trapezoid(
    f: Callable[[float], float],
    a: float,
    b: float,
    n: int,
) -> float:
    """Composite trapezoidal estimate of the integral of ``f`` over [a, b].

    Slabs are summed in increasing order, so identical arguments always
    give a bit-identical result.

    Args:
        f: Function to integrate.
        a: Lower bound.
        b: Upper bound. ``a > b`` is allowed and flips the sign.
        n: Number of slabs, at least 1.

    Returns:
        The estimate ``dx/2 * sum(f(x_i) + f(x_{i+1}))`` with ``dx = (b-a)/n``.

    Raises:
        TypeError: If ``n`` is not an int.
        ValueError: If ``n < 1``, a bound is not finite, or ``b - a``
            overflows.
        NonFiniteEvaluationError: If ``f`` is inf/nan or raises an
            ArithmeticError at a node.
        IntegrationError: If the summed estimate overflows.
    """
    validate_sample_count(n)
    validate_bounds(a, b)

    dx = (b - a) / n
    total = 0.0
    for i in range(n):
        total += evaluate(f, a + i * dx, METHOD) + evaluate(f, a + (i + 1) * dx, METHOD)

    result = check_result(dx / 2.0 * total, METHOD)
    logger.debug("trapezoid a=%g b=%g n=%d -> %.12g", a, b, n, result)
    return result
