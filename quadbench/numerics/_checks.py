"""Argument and evaluation guards shared by the estimators."""

from __future__ import annotations

import math
from collections.abc import Callable

from quadbench.errors import IntegrationError, NonFiniteEvaluationError


def validate_sample_count(n: int) -> None:
    """Raise unless ``n`` is an int >= 1."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"sample count must be an int, got {type(n).__name__}")
    if n < 1:
        raise ValueError(f"sample count must be >= 1, got {n}")


def validate_bounds(a: float, b: float) -> None:
    if not (math.isfinite(a) and math.isfinite(b)):
        raise ValueError(f"bounds must be finite, got a={a}, b={b}")
    if not math.isfinite(b - a):
        raise ValueError(f"interval width overflows, got a={a}, b={b}")


def evaluate(f: Callable[[float], float], x: float, method: str) -> float:
    """Evaluate ``f(x)``, surfacing inf/nan and arithmetic failures."""
    try:
        value = f(x)
    except ArithmeticError as exc:
        raise NonFiniteEvaluationError(
            method, x, None, reason=f"f({x!r}) raised {type(exc).__name__}: {exc}"
        ) from exc
    if not math.isfinite(value):
        raise NonFiniteEvaluationError(method, x, value)
    return value


def check_result(result: float, method: str) -> float:
    """Reject an estimate whose summation or scaling overflowed."""
    if not math.isfinite(result):
        raise IntegrationError(f"{method}: estimate is not finite ({result!r})", method=method)
    return result
