import pytest

from core.models import EstimatorInput
from core.rules import SLIDER_LIMITS, clamp, clamp_input


@pytest.mark.parametrize(
    "value, expected",
    [(-3, 1), (0, 1), (1, 1), (8, 8), (24, 24), (30, 24)],
)
def test_clamp(value: float, expected: float) -> None:
    assert clamp(value, 1, 24) == expected


def test_clamp_input_limits_hours_days_and_overlap() -> None:
    req = EstimatorInput(hDay=0, dWeek=9, overlapFraction=0.99)
    clamped = clamp_input(req)

    assert clamped.hours_per_day == 1
    assert clamped.days_per_week == 7
    assert clamped.overlap_fraction == 0.95
    # оригінальний знімок не змінюється
    assert req.hours_per_day == 0


def test_clamp_input_keeps_valid_values(default_input: EstimatorInput) -> None:
    assert clamp_input(default_input) == default_input


def test_clamp_input_leaves_other_fields() -> None:
    req = EstimatorInput(workers=0, aFloor=10)
    clamped = clamp_input(req)
    assert clamped.worker_count == 0
    assert clamped.area_per_floor == 10


def test_slider_limits() -> None:
    assert SLIDER_LIMITS["days_per_floor_structural"][:2] == (6, 18)
    assert SLIDER_LIMITS["finishes_man_hours_per_m2"][:2] == (15, 60)
    assert SLIDER_LIMITS["overlap_fraction"] == (0.0, 0.95, 0.05)
