# src/sanitize.py
"""Parameter sanitization for the dimming curve generators.

Dimming curves are generated on hosts that have no error channel, so bad shape
parameters are never rejected: they are replaced by safe defaults, or the
generator falls back to the linear curve. Every helper here returns the value
that will actually be used together with a flag telling whether it differs from
what the caller passed, so the registry can report adjustments without
re-implementing the rules.
"""

import math
import numbers

from config.curve_defaults import PWM_MAX, CURVE_DEFAULTS


def to_float(value) -> float:
    """float(value), saturating integers too large for a double to +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def is_positive_finite(value) -> bool:
    value = to_float(value)
    return math.isfinite(value) and value > 0.0


def positive_or_default(value, default):
    """
    Returns (value, False) for a positive value (inf included),
    (default, True) for NaN or <= 0.
    """
    value = to_float(value)
    if value > 0.0:
        return value, False
    return default, True


def sanitize_threshold(t):
    """
    LED hybrid threshold must lie in (0, 1].
    NaN / non-positive -> default, above 1 (inf included) -> 1.0
    """
    t = to_float(t)
    if not t > 0.0:
        return CURVE_DEFAULTS["threshold"], True
    if t > 1.0:
        return 1.0, True
    return t, False


def sanitize_pwm_min(value):
    if isinstance(value, numbers.Integral):
        clamped = min(max(int(value), 0), PWM_MAX)
        return clamped, clamped != value

    if not math.isfinite(value):
        return 0, True
    clamped = min(max(int(value), 0), PWM_MAX)
    return clamped, clamped != value


def exponential_denominator(k):
    """
    Returns e^k - 1 for a usable rate, None when the exponential
    curve must fall back to linear (k < 0, NaN, k == 0, overflow).
    """
    k = to_float(k)
    if not k >= 0.0 or k == 0.0:
        return None

    try:
        denom = math.expm1(k)
    except OverflowError:
        return None

    if denom == 0.0 or not math.isfinite(denom):
        return None
    return denom
