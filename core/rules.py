# core/rules.py
# Правила на вході: clamp і межі слайдерів.

from __future__ import annotations

from .models import EstimatorInput

HOURS_PER_DAY_RANGE = (1.0, 24.0)
DAYS_PER_WEEK_RANGE = (1.0, 7.0)
OVERLAP_RANGE = (0.0, 0.95)

# межі слайдерів: (min, max, step)
SLIDER_LIMITS: dict[str, tuple[float, float, float]] = {
    "days_per_floor_structural": (6, 18, 1),
    "finishes_man_hours_per_m2": (15, 60, 1),
    "overlap_fraction": (0.0, 0.95, 0.05),
}


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clamp_input(req: EstimatorInput) -> EstimatorInput:
    """Новий знімок з hours/day, days/week і overlap у дозволених межах."""
    data = req.model_dump()
    data.update(
        hours_per_day=clamp(req.hours_per_day, *HOURS_PER_DAY_RANGE),
        days_per_week=clamp(req.days_per_week, *DAYS_PER_WEEK_RANGE),
        overlap_fraction=clamp(req.overlap_fraction, *OVERLAP_RANGE),
    )
    return EstimatorInput.model_validate(data)
