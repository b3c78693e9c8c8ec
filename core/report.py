# core/report.py
# Текстовий підсумок для CLI / print view. Округлення тільки тут (display).

from __future__ import annotations

import math

from .calculator import days_to_months, days_to_weeks
from .models import EstimateResult, EstimatorInput
from .phases import legend, phase_shares, render_bar

TITLE = "Optimistic Construction Duration Estimator"

USAGE_NOTE = (
    "Adjust the inputs to match your project; every change recomputes the estimate. "
    "Defaults are optimistic (8 hrs/day, 7 days/week). Increase days per floor, finishes "
    "man-hours per m2 or reduce the overlap for more conservative estimates. "
    "Use 'export' to copy the inputs as JSON."
)

FOOTER = (
    "Built for quick optimistic estimates. For production planning, combine with "
    "supplier lead-times and local permit calendars."
)


def format_number(x: float) -> str:
    """1234.5 -> '1,234.5'; цілі без десяткових."""
    if float(x).is_integer():
        return f"{x:,.0f}"
    return f"{x:,.2f}"


def format_days(days: float) -> str:
    return f"{math.ceil(days)} days"


def format_weeks(days: float, days_per_week: float) -> str:
    weeks = days_to_weeks(days, days_per_week)
    if weeks is None:
        return "n/a weeks"
    return f"{weeks:.1f} weeks"


def format_months(days: float) -> str:
    return f"{days_to_months(days):.1f} months"


def summary_lines(req: EstimatorInput, result: EstimateResult) -> list[str]:
    out = result.output
    dw = req.days_per_week
    fixed_days = req.pre_construction_days + req.foundation_days + req.commissioning_days

    lines = [
        f"Gross floor area (GFA):       {format_number(out.gross_floor_area)} m2",
        f"Man-hours available / day:    {format_number(out.man_hours_per_day)} MH/day",
        f"Structural duration:          {format_number(out.structural_days)} days, "
        f"{format_weeks(out.structural_days, dw)}",
        f"Finishes total man-hours:     {format_number(round(out.finishes_man_hours_total))} MH",
    ]

    if not out.duration_defined:
        lines.append("Duration undefined: no labour capacity (workers x hours/day = 0).")
        lines.append("Set workers and hours per day above zero to get an estimate.")
        return lines

    lines += [
        f"Finishes if run alone:        {format_days(out.finishes_days_if_sequential)}, "
        f"{format_weeks(out.finishes_days_if_sequential, dw)}",
        f"Finishes remaining (overlap): {format_days(out.finishes_days_remaining)}, "
        f"{format_weeks(out.finishes_days_remaining, dw)}",
        f"Pre + Foundations + Commission: {format_number(fixed_days)} days",
        f"TOTAL:                        {format_days(out.total_days)}",
        f"                              ~ {format_weeks(out.total_days, dw)}, "
        f"~ {format_months(out.total_days)} (calendar)",
    ]
    return lines


def input_lines(req: EstimatorInput) -> list[str]:
    return [
        f"Area per floor:           {format_number(req.area_per_floor)} m2",
        f"Storeys:                  {req.floor_count}",
        f"Workers on site:          {req.worker_count}",
        f"Hours per day:            {format_number(req.hours_per_day)}",
        f"Days per week:            {format_number(req.days_per_week)}",
        f"Days per floor (struct):  {format_number(req.days_per_floor_structural)}",
        f"Finishes MH per m2:       {format_number(req.finishes_man_hours_per_m2)}",
        f"Pre-construction:         {format_number(req.pre_construction_days)} days",
        f"Foundations:              {format_number(req.foundation_days)} days",
        f"Commission & snagging:    {format_number(req.commissioning_days)} days",
        f"Finishes overlap:         {round(req.overlap_fraction * 100)}%",
    ]


def phase_lines(result: EstimateResult, width: int = 50) -> list[str]:
    if result.phases is None:
        return ["Phase breakdown: (not available, duration undefined)"]
    shares = phase_shares(result.phases)
    lines = [render_bar(shares, width), legend()]
    for s in shares:
        lines.append(f" - {s.label:<20} {s.days:8.1f} days  {s.width_pct:3d}%")
    return lines


def print_view(req: EstimatorInput, result: EstimateResult) -> str:
    parts = [TITLE, "=" * len(TITLE), "", "Inputs:"]
    parts += input_lines(req)
    parts += ["", "Calculated outputs (optimistic):"]
    parts += summary_lines(req, result)
    if result.output.notes:
        parts += ["", "Notes:"]
        parts += [f" - {n}" for n in result.output.notes]
    parts += ["", "Phase breakdown:"]
    parts += phase_lines(result)
    parts += ["", FOOTER]
    return "\n".join(parts) + "\n"
