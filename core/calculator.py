from __future__ import annotations

import logging
import math
from typing import Optional

from .models import EstimateResult, EstimatorInput, EstimatorOutput, PhaseBreakdown

logger = logging.getLogger(__name__)

# середня тривалість календарного місяця
AVERAGE_MONTH_DAYS = 30.44


def days_to_weeks(days: float, days_per_week: float) -> Optional[float]:
    if days_per_week == 0:
        return None
    return days / days_per_week


def days_to_months(days: float) -> float:
    return days / AVERAGE_MONTH_DAYS


def _check_finite(*values: float) -> None:
    # дуже великі скінченні входи можуть дати inf при множенні
    if not all(math.isfinite(v) for v in values):
        raise ValueError("Inputs are too large: derived values overflow")


def calculate_estimate(req: EstimatorInput) -> EstimateResult:
    """
    Optimistic duration: чиста функція, без clamp і без округлення.
    Якщо workers * hours/day == 0, тривалість не визначена (status="undefined_duration").
    """
    notes: list[str] = []

    try:
        gross_floor_area = req.area_per_floor * req.floor_count
        man_hours_per_day = req.worker_count * req.hours_per_day
        structural_days = req.days_per_floor_structural * req.floor_count
        finishes_man_hours_total = req.finishes_man_hours_per_m2 * gross_floor_area
    except OverflowError as e:
        # величезний int (workers, nFloors) не перетворюється на float
        raise ValueError("Inputs are too large: derived values overflow") from e
    _check_finite(gross_floor_area, man_hours_per_day, structural_days, finishes_man_hours_total)

    if man_hours_per_day == 0:
        notes.append("No labour capacity (workers x hours/day = 0): finishes duration is undefined.")
        logger.debug("undefined duration: workers=%s hours_per_day=%s", req.worker_count, req.hours_per_day)
        output = EstimatorOutput(
            gross_floor_area=gross_floor_area,
            man_hours_per_day=man_hours_per_day,
            structural_days=structural_days,
            finishes_man_hours_total=finishes_man_hours_total,
            status="undefined_duration",
            notes=notes,
        )
        return EstimateResult(output=output, phases=None)

    finishes_days_if_sequential = finishes_man_hours_total / man_hours_per_day
    finishes_days_remaining = (1 - req.overlap_fraction) * finishes_days_if_sequential

    total_days = (
        req.pre_construction_days
        + req.foundation_days
        + structural_days
        + finishes_days_remaining
        + req.commissioning_days
    )

    total_weeks = days_to_weeks(total_days, req.days_per_week)
    _check_finite(finishes_days_if_sequential, total_days, total_weeks or 0.0)

    if req.days_per_week == 0:
        notes.append("Days per week is 0: week equivalents are not shown.")

    output = EstimatorOutput(
        gross_floor_area=gross_floor_area,
        man_hours_per_day=man_hours_per_day,
        structural_days=structural_days,
        finishes_man_hours_total=finishes_man_hours_total,
        finishes_days_if_sequential=finishes_days_if_sequential,
        finishes_days_remaining=finishes_days_remaining,
        total_days=total_days,
        total_weeks=total_weeks,
        total_months=days_to_months(total_days),
        notes=notes,
    )

    phases = PhaseBreakdown(
        pre=req.pre_construction_days,
        foundation=req.foundation_days,
        structural=structural_days,
        finishes_remaining=finishes_days_remaining,
        commissioning=req.commissioning_days,
        total=total_days,
    )

    logger.debug("estimate: total_days=%.4f gfa=%.2f", total_days, gross_floor_area)
    return EstimateResult(output=output, phases=phases)
