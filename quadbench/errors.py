"""Exceptions raised when an integral cannot be estimated."""

from __future__ import annotations


class IntegrationError(RuntimeError):
    """An estimator could not produce a finite result.

    Attributes:
        method: Estimator name ("trapezoidal" or "monte_carlo").
        function_name: Display name of the integrand, if known.
        n: Sample count of the failing call, if known.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        function_name: str | None = None,
        n: int | None = None,
    ):
        super().__init__(message)
        self.method = method
        self.function_name = function_name
        self.n = n


class NonFiniteEvaluationError(IntegrationError):
    """The integrand returned inf/nan or raised an arithmetic error at ``x``."""

    def __init__(self, method: str, x: float, value: float | None, reason: str | None = None):
        detail = reason if reason is not None else f"f({x!r}) = {value!r}"
        super().__init__(f"{method}: non-finite integrand evaluation, {detail}", method=method)
        self.x = x
        self.value = value
