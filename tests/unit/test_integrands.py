"""Unit tests for the demo integrands."""

import dataclasses
import math

import pytest

from quadbench.integrands import (
    DEMO_INTEGRANDS,
    SINGULARITY_EPSILON,
    NamedIntegrand,
    gaussian,
    make_sinusoid,
    sinusoid,
)


class TestGaussian:
    def test_peak_at_zero(self):
        assert gaussian(0.0) == 1.0

    def test_symmetric(self):
        assert gaussian(1.3) == gaussian(-1.3)

    def test_tail_is_tiny_at_five(self):
        assert gaussian(5.0) < 1e-10


class TestSinusoid:
    def test_value_in_unit_range(self):
        for i in range(201):
            value = sinusoid(i / 100.0)
            assert 0.0 <= value <= 1.0

    def test_middle_of_interval(self):
        """x(2 - x) = 1 at x = 1."""
        assert abs(sinusoid(1.0) - math.sin(1.0) ** 2) < 1e-9

    @pytest.mark.parametrize("x", [0.0, 2.0])
    def test_guard_keeps_endpoints_finite(self, x):
        assert math.isfinite(sinusoid(x))

    def test_default_guard(self):
        assert SINGULARITY_EPSILON == 1e-12
        assert make_sinusoid()(0.3) == sinusoid(0.3)

    @pytest.mark.parametrize("x", [0.0, 2.0])
    def test_unguarded_raises_at_singularity(self, x):
        with pytest.raises(ZeroDivisionError):
            make_sinusoid(0.0)(x)


class TestNamedIntegrand:
    def test_callable(self):
        named = NamedIntegrand("Square", lambda x: x * x, 0.0, 1.0)
        assert named(3.0) == 9.0

    def test_frozen(self):
        named = NamedIntegrand("Square", lambda x: x * x, 0.0, 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            named.a = 2.0

    def test_demo_integrands(self):
        assert [(i.name, i.a, i.b) for i in DEMO_INTEGRANDS] == [
            ("Gaussian", -5.0, 5.0),
            ("Sinusoid", 0.0, 2.0),
        ]
        assert DEMO_INTEGRANDS[0].func is gaussian
        assert DEMO_INTEGRANDS[1].func is sinusoid
