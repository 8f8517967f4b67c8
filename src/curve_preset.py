# src/curve_preset.py
"""Data structure describing one named dimming curve shape.

A preset only carries the curve type and its shape parameters. The table
itself is always regenerated from these values, which keeps presets small
enough to live in a hand-edited JSON file next to the application.
"""

from dataclasses import dataclass, replace

from config.curve_defaults import CURVE_DEFAULTS


@dataclass(frozen=True)
class CurvePreset:
    name: str
    curve: str
    gamma: float = CURVE_DEFAULTS["gamma"]
    rate: float = CURVE_DEFAULTS["rate"]
    threshold: float = CURVE_DEFAULTS["threshold"]
    gamma_low: float = CURVE_DEFAULTS["gamma_low"]
    gamma_high: float = CURVE_DEFAULTS["gamma_high"]
    pwm_min: int = CURVE_DEFAULTS["pwm_min"]

    def with_overrides(self, **overrides):
        """Copy of this preset with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
