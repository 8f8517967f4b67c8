"""Property-based tests for the dimming curve generators.

Every generator must produce a valid table for any parameter it can be handed,
including NaN, infinities, zero, negatives and extreme magnitudes.
"""

import math

import numpy as np
from hypothesis import given, settings, strategies as st

from src.dim_curve import (
    PWM_MAX,
    new_table,
    clamp_pwm,
    linear,
    gamma,
    exponential,
    led_low_end_boost,
    led_hybrid,
    led_s_curve,
    validate,
)

any_float = st.floats(allow_nan=True, allow_infinity=True)
huge_int = st.integers(min_value=-(10 ** 500), max_value=10 ** 500)
any_number = st.one_of(any_float, st.integers(), huge_int)
shape_gamma = st.floats(min_value=0.1, max_value=5.0)


class TestCurveProperties:
    """Fuzz every generator and check the table invariants."""

    @settings(max_examples=200)
    @given(g=any_number)
    def test_gamma_always_valid(self, g):
        assert validate(gamma(new_table(), g))

    @settings(max_examples=200)
    @given(k=any_number)
    def test_exponential_always_valid(self, k):
        assert validate(exponential(new_table(), k))

    @settings(max_examples=200)
    @given(g=any_number, pwm_min=st.one_of(st.integers(), huge_int))
    def test_low_end_boost_always_valid(self, g, pwm_min):
        table = led_low_end_boost(new_table(), g, pwm_min)
        assert validate(table)
        assert table[0] == 0
        assert table[1] >= min(max(pwm_min, 0), PWM_MAX)

    @settings(max_examples=200)
    @given(t=any_number, gamma_low=any_number, gamma_high=any_number)
    def test_hybrid_always_valid(self, t, gamma_low, gamma_high):
        assert validate(led_hybrid(new_table(), t, gamma_low, gamma_high))

    @settings(max_examples=200)
    @given(g=any_number)
    def test_s_curve_always_valid(self, g):
        assert validate(led_s_curve(new_table(), g))

    @settings(max_examples=100)
    @given(g=st.one_of(st.floats(max_value=0.0), st.just(float("nan"))))
    def test_gamma_fallback_is_linear(self, g):
        assert np.array_equal(gamma(new_table(), g), linear(new_table()))

    @settings(max_examples=100)
    @given(k=st.one_of(st.floats(max_value=0.0), st.just(float("nan"))))
    def test_exponential_fallback_is_linear(self, k):
        assert np.array_equal(exponential(new_table(), k), linear(new_table()))

    @settings(max_examples=100)
    @given(i=st.integers(min_value=1, max_value=255), gamma_low=shape_gamma, gamma_high=shape_gamma)
    def test_hybrid_seam_within_one_step(self, i, gamma_low, gamma_high):
        """
        At the index of the seam both segment formulas agree
        up to one PWM step.
        """
        t = i / 255
        x = i / 255
        y_t = t ** gamma_high

        low = math.floor((x / t) ** gamma_low * y_t * PWM_MAX + 0.5)
        high = math.floor(x ** gamma_high * PWM_MAX + 0.5)
        assert abs(low - high) <= 1

        table = led_hybrid(new_table(), t, gamma_low, gamma_high)
        assert abs(int(table[i]) - high) <= 1

    @settings(max_examples=100)
    @given(g=shape_gamma, k=st.floats(min_value=0.01, max_value=50.0))
    def test_generators_are_deterministic(self, g, k):
        assert np.array_equal(gamma(new_table(), g), gamma(new_table(), g))
        assert np.array_equal(exponential(new_table(), k), exponential(new_table(), k))
        assert np.array_equal(led_s_curve(new_table(), g), led_s_curve(new_table(), g))


class TestClampPwmProperties:

    @settings(max_examples=300)
    @given(v=st.one_of(st.integers(), huge_int))
    def test_clamp_pwm_in_range_and_idempotent(self, v):
        c = clamp_pwm(v)
        assert 0 <= c <= PWM_MAX
        assert clamp_pwm(c) == c
        if 0 <= v <= PWM_MAX:
            assert c == v
