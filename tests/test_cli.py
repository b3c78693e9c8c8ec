"""Tests for the interactive CLI (input() is scripted with monkeypatch)."""

from pathlib import Path

import pytest

import main_cli
from cli import app as cli_app
from core.export import export_inputs
from core.models import EstimatorInput


def feed(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


def test_ask_float_default_retries(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    feed(monkeypatch, ["abc", "-2", "12,5"])
    assert cli_app.ask_float_default("Hours", 8, min_value=0) == 12.5
    out = capsys.readouterr().out
    assert "Enter a number" in out
    assert "must be >= 0" in out


def test_ask_float_default_enter_keeps_default(monkeypatch: pytest.MonkeyPatch) -> None:
    feed(monkeypatch, [""])
    assert cli_app.ask_float_default("Hours", 8) == 8.0


def test_ask_field_reprompts_on_invalid_overlap(monkeypatch: pytest.MonkeyPatch) -> None:
    feed(monkeypatch, ["1.2", "0.6"])
    req = cli_app.ask_field(EstimatorInput(), "overlap_fraction", "Overlap")
    assert req.overlap_fraction == 0.6


def test_run_cli_with_defaults(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    # preset + 11 полів (Enter) + quit
    feed(monkeypatch, [""] + [""] * len(cli_app.FIELDS) + ["q"])
    req = cli_app.run_cli()

    assert req == EstimatorInput()
    out = capsys.readouterr().out
    assert "232 days" in out
    assert "Phase breakdown" in out


def test_run_cli_clamps_hours(monkeypatch: pytest.MonkeyPatch) -> None:
    answers = ["optimistic", "", "", "", "30"] + [""] * (len(cli_app.FIELDS) - 4) + ["q"]
    feed(monkeypatch, answers)
    req = cli_app.run_cli()
    assert req.hours_per_day == 24


def test_edit_field_recomputes(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    # e -> поле 3 (workers) -> 0 -> quit
    feed(monkeypatch, ["e", "3", "0", "q"])
    req = cli_app.run_cli(EstimatorInput(), prompt_fields=False)

    assert req.worker_count == 0
    assert "Duration undefined" in capsys.readouterr().out


def test_export_action_saves_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["x", "y", "tower_a", "q"])
    cli_app.run_cli(EstimatorInput(), prompt_fields=False)

    saved = (tmp_path / "tower_a.json").read_text(encoding="utf-8")
    assert saved.strip() == export_inputs(EstimatorInput())


def test_print_action_saves_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["p", "y", "", "u", "q"])
    cli_app.run_cli(EstimatorInput(), prompt_fields=False)

    assert "Calculated outputs" in (tmp_path / "estimate.txt").read_text(encoding="utf-8")


def test_main_no_prompt_with_inputs_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    path = tmp_path / "inputs.json"
    path.write_text(export_inputs(EstimatorInput(workers=130)), encoding="utf-8")

    main_cli.main(["--inputs", str(path), "--no-prompt"])

    assert "1,040 MH/day" in capsys.readouterr().out


def test_main_unknown_preset() -> None:
    with pytest.raises(SystemExit):
        main_cli.main(["--preset", "nope", "--no-prompt"])


@pytest.mark.parametrize("bad", ["nan", "inf", "-inf", "1e400"])
def test_ask_float_default_rejects_non_finite(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, bad: str
) -> None:
    feed(monkeypatch, [bad, "5"])
    assert cli_app.ask_float_default("Workers", 65, min_value=0) == 5.0
    assert "Enter a number" in capsys.readouterr().out


@pytest.mark.parametrize("field", ["worker_count", "floor_count"])
def test_ask_field_count_survives_nan(monkeypatch: pytest.MonkeyPatch, field: str) -> None:
    feed(monkeypatch, ["nan", "5"])
    req = cli_app.ask_field(EstimatorInput(), field, "Count")
    assert getattr(req, field) == 5


def test_ask_field_rejects_fractional_count(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    feed(monkeypatch, ["9.7", "10"])
    req = cli_app.ask_field(EstimatorInput(), "floor_count", "Number of storeys")

    assert req.floor_count == 10
    assert "Enter a whole number" in capsys.readouterr().out


def test_ask_field_accepts_whole_float_for_count(monkeypatch: pytest.MonkeyPatch) -> None:
    feed(monkeypatch, ["12.0"])
    req = cli_app.ask_field(EstimatorInput(), "floor_count", "Number of storeys")
    assert req.floor_count == 12


def test_ask_field_rejects_overflowing_value(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    feed(monkeypatch, ["1e308", "600"])
    req = cli_app.ask_field(EstimatorInput(), "area_per_floor", "Area per floor")

    assert req.area_per_floor == 600
    assert "too large" in capsys.readouterr().out


def test_export_after_edit_keeps_number_format(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    # e -> поле 5 (days per week) -> 7 -> export -> save
    feed(monkeypatch, ["e", "5", "7", "x", "y", "after_edit", "q"])
    cli_app.run_cli(EstimatorInput(), prompt_fields=False)

    saved = (tmp_path / "after_edit.json").read_text(encoding="utf-8")
    assert saved.strip() == export_inputs(EstimatorInput())


def test_main_rejects_overflowing_inputs_file(tmp_path: Path) -> None:
    path = tmp_path / "inputs.json"
    path.write_text('{"aFloor": 1e308, "nFloors": 10}', encoding="utf-8")

    with pytest.raises(SystemExit):
        main_cli.main(["--inputs", str(path), "--no-prompt"])
