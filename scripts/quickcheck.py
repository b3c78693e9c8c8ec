"""Quick runtime checks for the duration estimator.
Run: python scripts/quickcheck.py
Exits with code 0 on success, non-zero on failure.
"""
import math

from core.calculator import calculate_estimate
from core.export import export_inputs, parse_export
from core.models import EstimatorInput


def approx(a, b, tol=1e-6):
    return abs(a - b) <= tol


def main():
    req = EstimatorInput()

    res = calculate_estimate(req).output

    assert approx(res.gross_floor_area, 4995.0)
    assert approx(res.man_hours_per_day, 520.0)
    assert approx(res.structural_days, 90.0)
    assert approx(res.finishes_man_hours_total, 149850.0)
    assert approx(res.finishes_days_if_sequential, 149850.0 / 520.0)
    assert math.ceil(res.total_days) == 232

    assert parse_export(export_inputs(req)) == req

    zero = calculate_estimate(req.with_value("worker_count", 0)).output
    assert zero.status == "undefined_duration"
    assert zero.total_days is None

    print("Quickcheck OK")


if __name__ == '__main__':
    main()
