# src/dim_curve.py
"""Perceptual dimming curves for 10-bit LED PWM outputs.

Each generator fills a caller-owned table of 256 PWM levels (0..1023) that maps
a linear brightness index to a duty cycle. Tables always start at 0 and end at
PWM_MAX, stay inside the PWM range and never decrease, whatever parameters are
passed in: invalid shape parameters are sanitized or make the generator fall
back to the linear curve instead of raising.

Nothing here keeps state between calls, so generators can be called from any
thread as long as every caller brings its own table.
"""

import numpy as np

from config.curve_defaults import PWM_MAX, TABLE_SIZE, CURVE_DEFAULTS, DALI_MAX_LEVEL, DALI_RANGE
from src.sanitize import (
    is_positive_finite,
    positive_or_default,
    sanitize_threshold,
    sanitize_pwm_min,
    exponential_denominator,
)

__all__ = [
    "PWM_MAX",
    "TABLE_SIZE",
    "new_table",
    "clamp_pwm",
    "clamp01",
    "enforce_endpoints",
    "linear",
    "gamma",
    "exponential",
    "dali_log",
    "led_low_end_boost",
    "led_hybrid",
    "led_s_curve",
    "validate",
]


# ==================================================
# HELPERS
# ==================================================

def new_table():
    return np.zeros(TABLE_SIZE, dtype=np.uint16)


def clamp_pwm(value: int) -> int:
    if value < 0:
        return 0
    if value > PWM_MAX:
        return PWM_MAX
    return int(value)


def clamp01(value: float) -> float:
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def enforce_endpoints(out):
    out[0] = 0
    out[TABLE_SIZE - 1] = PWM_MAX
    return out


def _positions():
    # normalized brightness position of every index, 0.0 .. 1.0
    return np.arange(TABLE_SIZE, dtype=np.float64) / (TABLE_SIZE - 1)


def _round_pwm(scaled):
    """
    Round half away from zero, then saturate like clamp_pwm.
    """
    scaled = np.asarray(scaled, dtype=np.float64)
    levels = np.copysign(np.floor(np.abs(scaled) + 0.5), scaled)
    return np.clip(levels, 0, PWM_MAX).astype(np.int64)


def _to_pwm(y):
    # normalized 0..1 -> PWM level
    return _round_pwm(np.asarray(y, dtype=np.float64) * PWM_MAX)


def _write(out, levels):
    if len(out) != TABLE_SIZE:
        raise ValueError(f"Dim curve table must hold {TABLE_SIZE} entries, got {len(out)}")

    if isinstance(out, np.ndarray):
        out[:] = levels
    else:
        out[:] = levels.tolist()

    return enforce_endpoints(out)


# ==================================================
# BASIC CURVES
# ==================================================

def linear(out):
    """y = x, also the fallback for every other curve."""
    return _write(out, _to_pwm(_positions()))


def gamma(out, g: float):
    """y = x^g, linear when g is not a finite positive number."""
    if not is_positive_finite(g):
        return linear(out)

    return _write(out, _to_pwm(np.power(_positions(), float(g))))


def exponential(out, k: float):
    """
    Normalized exponential ease:
        y = (e^(k*x) - 1) / (e^k - 1)
    k == 0 is the linear limit; negative, NaN or overflowing rates
    also give the linear curve.
    """
    denom = exponential_denominator(k)
    if denom is None:
        return linear(out)

    y = np.expm1(float(k) * _positions()) / denom
    return _write(out, _to_pwm(np.clip(y, 0.0, 1.0)))


def dali_log(out):
    """
    DALI arc power approximation.
    Index i -> level min(i, 254), fraction = 1000^((level - 254) / 253),
    i.e. ~0.1% at level 1 and 100% at level 254.
    """
    levels = np.zeros(TABLE_SIZE, dtype=np.int64)

    dali = np.minimum(np.arange(1, TABLE_SIZE), DALI_MAX_LEVEL).astype(np.float64)
    exponent = (dali - DALI_MAX_LEVEL) / (DALI_MAX_LEVEL - 1)
    levels[1:] = _to_pwm(np.power(DALI_RANGE, exponent))

    return _write(out, levels)


# ==================================================
# LED PRESETS
# ==================================================

def led_low_end_boost(out, g: float, pwm_min: int):
    """
    Gamma curve lifted onto a PWM floor for every non-zero index, so the
    first steps are not lost in the LED driver's dead zone. Index 0 stays
    a real "off".
    """
    pwm_min, _ = sanitize_pwm_min(pwm_min)
    g, _ = positive_or_default(g, CURVE_DEFAULTS["gamma"])

    y = np.power(_positions(), g)

    levels = _round_pwm(pwm_min + y * (PWM_MAX - pwm_min))
    levels[0] = 0
    return _write(out, levels)


def led_hybrid(out, t: float, gamma_low: float, gamma_high: float):
    """
    Two segment curve joined at x = t.

    Below t the segment is normalized to 0..1, shaped with gamma_low and
    scaled down to y_t = t^gamma_high. From t upwards it is plain
    x^gamma_high. Both sides evaluate to y_t at the seam, so the curve is
    continuous and monotonic for any positive gammas.
    """
    t, _ = sanitize_threshold(t)
    gamma_low, _ = positive_or_default(gamma_low, CURVE_DEFAULTS["gamma_low"])
    gamma_high, _ = positive_or_default(gamma_high, CURVE_DEFAULTS["gamma_high"])

    x = _positions()
    y_t = t ** gamma_high

    # both branches are evaluated, tiny t overflows x / t on the unused side
    with np.errstate(over="ignore", invalid="ignore"):
        y = np.where(
            x < t,
            np.power(x / t, gamma_low) * y_t,
            np.power(x, gamma_high),
        )
    return _write(out, _to_pwm(np.clip(y, 0.0, 1.0)))


def led_s_curve(out, g: float):
    """Smoothstep x^2 * (3 - 2x) followed by a gamma pass."""
    g, _ = positive_or_default(g, CURVE_DEFAULTS["gamma"])

    x = _positions()
    s = x * x * (3.0 - 2.0 * x)
    y = np.power(np.clip(s, 0.0, 1.0), g)
    return _write(out, _to_pwm(y))


# ==================================================
# VALIDATION
# ==================================================

def validate(table) -> bool:
    """
    True if:
    - table[0] == 0 and table[255] == PWM_MAX
    - every entry is within 0..PWM_MAX
    - the curve never decreases
    Entries must be whole numbers, 1023.7 is not a PWM level.
    """
    if len(table) != TABLE_SIZE:
        return False

    values = np.asarray(table)

    if values.dtype.kind == "f":
        if not np.all(np.isfinite(values)) or np.any(values != np.floor(values)):
            return False
    elif values.dtype.kind not in "iu":
        # bools, objects (ints beyond int64), strings
        return False

    if values.min() < 0 or values.max() > PWM_MAX:
        return False

    # in range now, widen so diff cannot wrap on unsigned tables
    values = values.astype(np.int64)

    if values[0] != 0 or values[-1] != PWM_MAX:
        return False

    return bool(np.all(np.diff(values) >= 0))
