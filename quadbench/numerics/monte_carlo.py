"""Plain Monte Carlo integration.

Samples are drawn uniformly, with no stratification or importance
weighting. The variance of the estimate falls roughly as 1/n, but a single
run is not guaranteed to improve as n grows.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from quadbench.numerics._checks import (
    check_result,
    evaluate,
    validate_bounds,
    validate_sample_count,
)

logger = logging.getLogger(__name__)

METHOD = "monte_carlo"

# random.uniform may never return its upper bound; widening it keeps b reachable.
SAMPLING_EPSILON = 1e-12


def integrate_monte_carlo(
    f: Callable[[float], float],
    a: float,
    b: float,
    n: int,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> float:
    """Monte Carlo estimate of the integral of ``f`` over [a, b].

    Every call owns a fresh generator. Without ``seed`` it is seeded from
    OS entropy, so two identical calls normally disagree; pass ``seed`` for
    a reproducible run.

    Args:
        f: Function to integrate.
        a: Lower bound.
        b: Upper bound.
        n: Number of samples, at least 1.
        seed: Seed for the per-call generator.
        rng: Generator to draw from instead of a fresh one. Mutually
            exclusive with ``seed``.

    Returns:
        ``(b - a) * mean(f(x_k))`` over ``n`` uniform samples ``x_k``.

    Raises:
        TypeError: If ``n`` is not an int.
        ValueError: If ``n < 1``, a bound is not finite, ``b - a``
            overflows, or both ``seed`` and ``rng`` are given.
        NonFiniteEvaluationError: If ``f`` is inf/nan or raises an
            ArithmeticError at a sample.
        IntegrationError: If the summed estimate overflows.
    """
    validate_sample_count(n)
    validate_bounds(a, b)
    if seed is not None and rng is not None:
        raise ValueError("pass either seed or rng, not both")

    if rng is None:
        rng = random.Random(seed)

    high = b + SAMPLING_EPSILON
    total = 0.0
    for _ in range(n):
        total += evaluate(f, rng.uniform(a, high), METHOD)

    result = check_result((b - a) / n * total, METHOD)
    logger.debug("monte carlo a=%g b=%g n=%d seed=%s -> %.12g", a, b, n, seed, result)
    return result
