# core/phases.py
# Пропорційні частки фаз для візуального бару.

from __future__ import annotations

import math

from pydantic import BaseModel

from .models import PhaseBreakdown

# мінімальна ширина фази, щоб нульові фази було видно
MIN_WIDTH_PCT = 1

PHASES: list[tuple[str, str]] = [
    ("pre", "Pre"),
    ("foundation", "Foundations"),
    ("structural", "Structure"),
    ("finishes_remaining", "Finishes Remaining"),
    ("commissioning", "Commission"),
]

BAR_CHARS = {
    "pre": "P",
    "foundation": "F",
    "structural": "S",
    "finishes_remaining": "R",
    "commissioning": "C",
}


class PhaseShare(BaseModel):
    key: str
    label: str
    days: float
    width_pct: int


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def phase_shares(phases: PhaseBreakdown) -> list[PhaseShare]:
    shares: list[PhaseShare] = []
    for key, label in PHASES:
        days = getattr(phases, key)
        if phases.total > 0:
            width = max(MIN_WIDTH_PCT, _round_half_up(days / phases.total * 100))
        else:
            width = MIN_WIDTH_PCT
        shares.append(PhaseShare(key=key, label=label, days=days, width_pct=width))
    return shares


def render_bar(shares: list[PhaseShare], width: int = 50) -> str:
    """Текстовий бар для терміналу: кожна фаза мінімум 1 символ."""
    cells = []
    for s in shares:
        n = max(1, _round_half_up(s.width_pct / 100 * width))
        cells.append(BAR_CHARS.get(s.key, "#") * n)
    return "[" + "".join(cells) + "]"


def legend() -> str:
    return "  ".join(f"{BAR_CHARS[k]}={label}" for k, label in PHASES)
