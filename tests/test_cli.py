import json

import pytest

from WLEDDimCurve import main


def test_default_preset_prints_c_array(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith("static const uint16_t dim_curve[256] = {")
    assert "1023," in out


def test_rows_format_and_var_name(capsys):
    assert main(["--preset", "dali", "--format", "rows"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("000: 0 1 ")


def test_overrides_apply_on_top_of_preset(capsys):
    assert main(["--preset", "linear", "--curve", "led_boost", "--pwm-min", "600", "--format", "rows"]) == 0

    first_row = capsys.readouterr().out.splitlines()[0].split()
    assert first_row[1] == "0"
    assert first_row[2] == "600"


def test_fallback_still_exits_zero(capsys):
    assert main(["--preset", "soft_exp", "--rate", "-1", "--verbose", "--format", "none"]) == 0
    assert capsys.readouterr().out == ""


def test_list(capsys):
    assert main(["--list"]) == 0

    out = capsys.readouterr().out
    assert "DEFAULT" in out
    assert "led_hybrid" in out


def test_unknown_preset_exits_two():
    assert main(["--preset", "nope", "--format", "none"]) == 2


def test_unknown_curve_in_presets_file_exits_two(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text(json.dumps({"DEFAULT": {"curve": "sine"}}), encoding="utf-8")

    assert main(["--presets-file", str(path), "--format", "none"]) == 2


def test_missing_presets_file_exits_two(tmp_path):
    assert main(["--presets-file", str(tmp_path / "missing.json")]) == 2


def test_invalid_curve_choice_rejected_by_argparse():
    with pytest.raises(SystemExit) as exc:
        main(["--curve", "sine"])
    assert exc.value.code == 2


def test_non_object_preset_entry_exits_two(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text(json.dumps({"DEFAULT": {"curve": "linear"}, "x": 5}), encoding="utf-8")

    assert main(["--presets-file", str(path), "--format", "none"]) == 2
