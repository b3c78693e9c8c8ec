# cli/app.py
# CLI = тимчасовий UI. Його можна замінити на Web/iOS, не чіпаючи core.

from __future__ import annotations

import math
from pathlib import Path

from pydantic import ValidationError

from core.calculator import calculate_estimate
from core.export import export_inputs, parse_export
from core.models import EstimatorInput
from core.presets import DEFAULT_PRESET_ID, Preset, load_presets
from core.report import TITLE, USAGE_NOTE, phase_lines, print_view, summary_lines
from core.rules import SLIDER_LIMITS, clamp_input

# (поле, підпис) у порядку форми
FIELDS: list[tuple[str, str]] = [
    ("area_per_floor", "Area per floor (m2)"),
    ("floor_count", "Number of storeys"),
    ("worker_count", "Workers on site (people)"),
    ("hours_per_day", "Hours per day (1-24)"),
    ("days_per_week", "Days per week (1-7)"),
    ("days_per_floor_structural", "Days per floor (structural cycle)"),
    ("finishes_man_hours_per_m2", "Finishes man-hours per m2"),
    ("pre_construction_days", "Pre-construction (days)"),
    ("foundation_days", "Foundations (days)"),
    ("commissioning_days", "Commission & snagging (days)"),
    ("overlap_fraction", "Finishes overlap fraction (0-0.95)"),
]

INT_FIELDS = {"floor_count", "worker_count"}


# ---------- ДОПОМІЖНІ ФУНКЦІЇ ВВОДУ ----------

def ask_float_default(prompt: str, default: float, *, min_value: float | None = None) -> float:
    """Ввід числа з дефолтом: Enter -> default."""
    while True:
        raw = input(f"{prompt} [{default}]: ").strip()
        if raw == "":
            value = float(default)
        else:
            raw = raw.replace(",", ".")
            try:
                value = float(raw)
            except ValueError:
                print("❌ Enter a number or press Enter")
                continue
            if not math.isfinite(value):
                print("❌ Enter a number or press Enter")
                continue

        if min_value is not None and value < min_value:
            print(f"❌ Value must be >= {min_value}")
            continue
        return value


def ask_yes_no(prompt: str) -> bool:
    """Безпечний ввід так/ні: повертає True або False."""
    while True:
        raw = input(prompt + " (y/n): ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print("❌ Enter y or n")


def field_hint(field: str) -> str:
    if field in SLIDER_LIMITS:
        lo, hi, _ = SLIDER_LIMITS[field]
        return f" (slider {lo:g}-{hi:g})"
    return ""


def ask_field(req: EstimatorInput, field: str, label: str) -> EstimatorInput:
    """Питає одне поле, поки знімок не пройде валідацію."""
    while True:
        current = getattr(req, field)
        value = ask_float_default(label + field_hint(field), current, min_value=0)
        if field in INT_FIELDS:
            if not value.is_integer():
                print("❌ Enter a whole number")
                continue
            value = int(value)
        try:
            new = req.with_value(field, value)
            calculate_estimate(new)
        except ValidationError as e:
            print(f"❌ {e.errors()[0]['msg']}")
            continue
        except ValueError as e:
            # overflow у похідних значеннях
            print(f"❌ {e}")
            continue
        return new


def choose_preset(presets: dict[str, Preset]) -> Preset:
    print("Available presets:")
    for k, p in presets.items():
        print(f" - {k}: {p.label}")

    while True:
        preset_id = input(f"\nChoose preset id [{DEFAULT_PRESET_ID}]: ").strip().lower() or DEFAULT_PRESET_ID
        if preset_id in presets:
            return presets[preset_id]
        print("❌ Unknown preset id")


def load_inputs_file(path: Path) -> EstimatorInput:
    return parse_export(path.read_text(encoding="utf-8"))


def show_estimate(req: EstimatorInput) -> None:
    result = calculate_estimate(req)

    print("\n--- Calculated outputs (optimistic) ---")
    for line in summary_lines(req, result):
        print(line)

    if result.output.notes:
        print("\nNotes:")
        for n in result.output.notes:
            print(f" - {n}")

    print("\n--- Phase breakdown ---")
    for line in phase_lines(result):
        print(line)
    print("---------------------------------------\n")


def edit_field(req: EstimatorInput) -> EstimatorInput:
    for i, (_, label) in enumerate(FIELDS, start=1):
        print(f" {i:2d}. {label}")
    raw = input("Field number: ").strip()
    if not raw.isdigit() or not 1 <= int(raw) <= len(FIELDS):
        print("❌ Unknown field")
        return req
    field, label = FIELDS[int(raw) - 1]
    return clamp_input(ask_field(req, field, label))


def export_action(req: EstimatorInput) -> None:
    text = export_inputs(req)
    print(f"\n{text}\n")
    if ask_yes_no("Save inputs to a JSON file?"):
        name = input("File name (example: tower_a): ").strip() or "estimator_inputs"
        path = Path(f"{name}.json")
        path.write_text(text + "\n", encoding="utf-8")
        print(f"✅ Saved: {path}\n")


def print_action(req: EstimatorInput) -> None:
    view = print_view(req, calculate_estimate(req))
    print(view)
    if ask_yes_no("Save print view to a text file?"):
        name = input("File name (example: 2025-12-30_tower_a): ").strip() or "estimate"
        path = Path(f"{name}.txt")
        path.write_text(view, encoding="utf-8")
        print(f"✅ Saved: {path}\n")


# ---------- ОСНОВНИЙ CLI СЦЕНАРІЙ ----------

MENU = "[e]dit field, e[x]port inputs, [p]rint view, [u]sage note, [q]uit"


def run_cli(initial: EstimatorInput | None = None, *, prompt_fields: bool = True) -> EstimatorInput:
    """Інтерактивна форма. Повертає останній знімок вводу."""
    print(f"\n=== {TITLE} (CLI) ===\n")

    if initial is None:
        initial = choose_preset(load_presets()).inputs

    req = initial
    if prompt_fields:
        print("\nPress Enter to keep the value in brackets.")
        for field, label in FIELDS:
            req = ask_field(req, field, label)

    req = clamp_input(req)
    show_estimate(req)

    while True:
        action = input(MENU + ": ").strip().lower()
        if action in ("q", "quit", ""):
            return req
        if action == "e":
            req = edit_field(req)
            show_estimate(req)
        elif action == "x":
            export_action(req)
        elif action == "p":
            print_action(req)
        elif action == "u":
            print(f"\n{USAGE_NOTE}\n")
        else:
            print("❌ Unknown action")
