# src/curve_preset_loader.py

import json
import os

from src.curve_preset import CurvePreset

_FLOAT_FIELDS = ("gamma", "rate", "threshold", "gamma_low", "gamma_high")


def load_curve_presets(json_path):
    if not os.path.isfile(json_path):
        raise RuntimeError(f"Curve presets file not found: {json_path}")

    with open(json_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Curve presets file must hold a JSON object: {json_path}")

    presets = {}

    for name, data in raw.items():
        if name.startswith("_"):
            continue

        if not isinstance(data, dict):
            raise ValueError(f"Curve preset '{name}' must be a JSON object")

        if "curve" not in data:
            raise ValueError(f"Curve preset '{name}' has no curve type")

        try:
            fields = {k: float(data[k]) for k in _FLOAT_FIELDS if k in data}
            if "pwm_min" in data:
                fields["pwm_min"] = int(data["pwm_min"])
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Curve preset '{name}' has an invalid field: {e}") from e

        presets[name] = CurvePreset(name=name, curve=str(data["curve"]), **fields)

    default = presets.get("DEFAULT")
    if default is None:
        raise ValueError("DEFAULT curve preset is required")

    return presets, default
