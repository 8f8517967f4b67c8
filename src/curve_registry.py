# src/curve_registry.py
"""Name based access to the dimming curve generators.

Hosts pick curves from configuration (a preset name, a UI dropdown), so this
module maps curve names to generators and runs them from a CurvePreset. It
also reports what the generator did with the parameters: whether the linear
fallback was taken and which values were replaced by safe defaults. The tables
are identical to what a direct call to the generator produces.
"""

from dataclasses import dataclass

from config.curve_defaults import CURVE_DEFAULTS
from src import dim_curve
from src.sanitize import (
    is_positive_finite,
    positive_or_default,
    sanitize_threshold,
    sanitize_pwm_min,
    exponential_denominator,
)


@dataclass(frozen=True)
class CurveResult:
    table: object
    curve: str
    fallback: bool
    sanitized: bool
    notes: tuple


def _default_note(label, value, changed, used):
    if changed:
        return [f"{label} {value!r} out of range, using {used!r}"]
    return []


# --------------------------------------------------
# generator adapters: run the curve, return (fallback, sanitized, notes)
# --------------------------------------------------

def _run_linear(out, preset):
    dim_curve.linear(out)
    return False, False, []


def _run_gamma(out, preset):
    dim_curve.gamma(out, preset.gamma)
    if is_positive_finite(preset.gamma):
        return False, False, []
    return True, False, [f"gamma {preset.gamma!r} is not a positive number, linear curve used"]


def _run_exponential(out, preset):
    dim_curve.exponential(out, preset.rate)
    if exponential_denominator(preset.rate) is not None:
        return False, False, []
    if preset.rate == 0.0:
        return True, False, ["rate 0 is the linear limit, linear curve used"]
    return True, False, [f"rate {preset.rate!r} is unusable, linear curve used"]


def _run_dali(out, preset):
    dim_curve.dali_log(out)
    return False, False, []


def _run_led_boost(out, preset):
    dim_curve.led_low_end_boost(out, preset.gamma, preset.pwm_min)

    g, g_changed = positive_or_default(preset.gamma, CURVE_DEFAULTS["gamma"])
    pwm_min, pwm_changed = sanitize_pwm_min(preset.pwm_min)

    notes = _default_note("gamma", preset.gamma, g_changed, g)
    notes += _default_note("pwm_min", preset.pwm_min, pwm_changed, pwm_min)
    return False, g_changed or pwm_changed, notes


def _run_led_hybrid(out, preset):
    dim_curve.led_hybrid(out, preset.threshold, preset.gamma_low, preset.gamma_high)

    t, t_changed = sanitize_threshold(preset.threshold)
    low, low_changed = positive_or_default(preset.gamma_low, CURVE_DEFAULTS["gamma_low"])
    high, high_changed = positive_or_default(preset.gamma_high, CURVE_DEFAULTS["gamma_high"])

    notes = _default_note("threshold", preset.threshold, t_changed, t)
    notes += _default_note("gamma_low", preset.gamma_low, low_changed, low)
    notes += _default_note("gamma_high", preset.gamma_high, high_changed, high)
    return False, t_changed or low_changed or high_changed, notes


def _run_led_scurve(out, preset):
    dim_curve.led_s_curve(out, preset.gamma)

    g, changed = positive_or_default(preset.gamma, CURVE_DEFAULTS["gamma"])
    return False, changed, _default_note("gamma", preset.gamma, changed, g)


CURVES = {
    "linear": _run_linear,
    "gamma": _run_gamma,
    "exponential": _run_exponential,
    "dali": _run_dali,
    "led_boost": _run_led_boost,
    "led_hybrid": _run_led_hybrid,
    "led_scurve": _run_led_scurve,
}


def curve_names():
    return list(CURVES)


def generate(out, preset):
    """
    Fill out with the curve named by preset.curve.
    Raises KeyError for an unknown curve name.
    """
    try:
        run = CURVES[preset.curve]
    except KeyError:
        raise KeyError(f"Unknown curve type: {preset.curve}") from None

    fallback, sanitized, notes = run(out, preset)

    return CurveResult(
        table=out,
        curve=preset.curve,
        fallback=fallback,
        sanitized=sanitized,
        notes=tuple(notes),
    )
