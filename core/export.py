# core/export.py
# Експорт/імпорт вводу як текст (JSON з коментарем-заголовком).

from __future__ import annotations

import json

from pydantic import ValidationError

from .models import EstimatorInput

EXPORT_HEADER = "// Optimistic estimator inputs (JSON)"

EXPORT_KEYS = (
    "aFloor",
    "nFloors",
    "workers",
    "hDay",
    "dWeek",
    "daysPerFloorStruct",
    "finishesMHPerM2",
    "preDays",
    "foundDays",
    "commissionDays",
    "overlapFraction",
)


def export_inputs(req: EstimatorInput) -> str:
    data = req.export_dict()
    body = json.dumps({k: data[k] for k in EXPORT_KEYS}, indent=2)
    return f"{EXPORT_HEADER}\n{body}"


def parse_export(text: str) -> EstimatorInput:
    """Парсить текст з export_inputs(). Рядки з // ігноруються."""
    lines = [ln for ln in text.splitlines() if not ln.strip().startswith("//")]
    try:
        raw = json.loads("\n".join(lines))
    except json.JSONDecodeError as e:
        raise ValueError(f"Export text is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError("Export text must contain a JSON object")

    unknown = sorted(set(raw) - set(EXPORT_KEYS))
    if unknown:
        raise ValueError(f"Unknown keys in export text: {', '.join(unknown)}")

    try:
        return EstimatorInput.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid inputs: {e}") from e
