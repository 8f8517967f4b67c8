import argparse
import sys

from configmanager import PRESETS_FILE

from src.dim_curve import new_table, validate
from src.curve_registry import generate, curve_names
from src.curve_preset_loader import load_curve_presets
from src.table_format import FORMATTERS
from src.message import Msg


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate a 256-entry, 10-bit LED dimming curve table"
    )

    parser.add_argument(
        "--preset",
        default=None,
        help="Curve preset name (default: DEFAULT preset)"
    )

    parser.add_argument(
        "--presets-file",
        default=PRESETS_FILE,
        help="Curve presets JSON file (default: config/curve_presets.json)"
    )

    parser.add_argument(
        "--curve",
        choices=curve_names(),
        default=None,
        help="Override the preset curve type"
    )

    parser.add_argument("--gamma", type=float, default=None, help="Gamma exponent")
    parser.add_argument("--rate", type=float, default=None, help="Exponential rate k")
    parser.add_argument("--threshold", type=float, default=None, help="LED hybrid threshold t in (0, 1]")
    parser.add_argument("--gamma-low", type=float, default=None, help="LED hybrid gamma below the threshold")
    parser.add_argument("--gamma-high", type=float, default=None, help="LED hybrid gamma above the threshold")
    parser.add_argument("--pwm-min", type=int, default=None, help="LED boost PWM floor (0..1023)")

    parser.add_argument(
        "--format",
        choices=[*FORMATTERS, "none"],
        default="c",
        help="Table output format on stdout (default: c)"
    )

    parser.add_argument(
        "--var-name",
        default="dim_curve",
        help="C array name for --format c (default: dim_curve)"
    )

    parser.add_argument(
        "--show",
        action="store_true",
        help="If present, open a preview window of the curve"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="If present, list every sanitized parameter"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List presets and curve types, then exit"
    )

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        presets, default = load_curve_presets(args.presets_file)
    except (RuntimeError, ValueError) as e:
        Msg.error(str(e))
        return 2

    if args.list:
        print("Presets:", " | ".join(presets))
        print("Curves :", " | ".join(curve_names()))
        return 0

    if args.preset is None:
        preset = default
    elif args.preset in presets:
        preset = presets[args.preset]
    else:
        Msg.error(f"Unknown preset: {args.preset}")
        return 2

    preset = preset.with_overrides(
        curve=args.curve,
        gamma=args.gamma,
        rate=args.rate,
        threshold=args.threshold,
        gamma_low=args.gamma_low,
        gamma_high=args.gamma_high,
        pwm_min=args.pwm_min,
    )

    try:
        result = generate(new_table(), preset)
    except KeyError as e:
        Msg.error(e.args[0])
        return 2

    valid = validate(result.table)

    if args.format == "c":
        print(FORMATTERS["c"](result.table, var_name=args.var_name))
    elif args.format != "none":
        print(FORMATTERS[args.format](result.table))

    Msg.curve_summary(preset, result, valid, verbose=args.verbose)

    if args.show:
        from src.curve_preview import CurvePreview

        CurvePreview().show(result.table, title=f"{preset.name} ({result.curve})")

    return 0 if valid else 1


if __name__ == "__main__":
    sys.exit(main())
