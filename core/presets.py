# core/presets.py
# Завантаження пресетів вводу з data/presets.json.

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel

from .models import EstimatorInput

logger = logging.getLogger(__name__)

PRESETS_PATH = Path(__file__).resolve().parents[1] / "data" / "presets.json"

DEFAULT_PRESET_ID = "optimistic"


class Preset(BaseModel):
    preset_id: str
    label: str
    description: str = ""
    inputs: EstimatorInput


def load_presets(path: Path | None = None) -> dict[str, Preset]:
    """Читає JSON з пресетами і повертає {preset_id: Preset}."""
    data_path = path or PRESETS_PATH
    raw = json.loads(data_path.read_text(encoding="utf-8"))

    presets: dict[str, Preset] = {}
    for preset_id, cfg in raw.items():
        presets[preset_id] = Preset(
            preset_id=preset_id,
            label=cfg.get("label", preset_id),
            description=cfg.get("description", ""),
            inputs=EstimatorInput.model_validate(cfg.get("inputs", {})),
        )

    logger.debug("loaded %d presets from %s", len(presets), data_path)
    return presets


def get_preset(preset_id: str, path: Path | None = None) -> Preset:
    presets = load_presets(path)
    if preset_id not in presets:
        raise ValueError(f"Unknown preset '{preset_id}'")
    return presets[preset_id]
