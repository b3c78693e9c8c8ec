from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DurationStatus = Literal["ok", "undefined_duration"]


class EstimatorInput(BaseModel):
    # alias = ключ у JSON-експорті (aFloor, nFloors, ...)
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="forbid",
        validate_default=True,
        allow_inf_nan=False,
    )

    area_per_floor: float = Field(default=555, ge=0, alias="aFloor")
    floor_count: int = Field(default=9, ge=0, alias="nFloors")
    worker_count: int = Field(default=65, ge=0, alias="workers")

    # clamp 1–24 / 1–7 робиться на вході (core.rules), не тут
    hours_per_day: float = Field(default=8, ge=0, alias="hDay")
    days_per_week: float = Field(default=7, ge=0, alias="dWeek")

    days_per_floor_structural: float = Field(default=10, ge=0, alias="daysPerFloorStruct")
    finishes_man_hours_per_m2: float = Field(default=30, ge=0, alias="finishesMHPerM2")

    pre_construction_days: float = Field(default=42, ge=0, alias="preDays")
    foundation_days: float = Field(default=28, ge=0, alias="foundDays")
    commissioning_days: float = Field(default=14, ge=0, alias="commissionDays")

    overlap_fraction: float = Field(default=0.8, ge=0, lt=1, alias="overlapFraction")

    def with_value(self, field: str, value: Any) -> EstimatorInput:
        """Новий знімок з одним зміненим полем (з валідацією)."""
        data = self.model_dump()
        if field not in data:
            raise ValueError(f"Unknown input field '{field}'")
        data[field] = value
        return EstimatorInput.model_validate(data)

    def export_dict(self) -> dict[str, Any]:
        """Ключі експорту; цілі float пишуться як int (555, не 555.0)."""
        data = self.model_dump(by_alias=True)
        return {k: int(v) if isinstance(v, float) and v.is_integer() else v for k, v in data.items()}


class EstimatorOutput(BaseModel):
    gross_floor_area: float
    man_hours_per_day: float
    structural_days: float
    finishes_man_hours_total: float

    # None, якщо man_hours_per_day == 0
    finishes_days_if_sequential: float | None = None
    finishes_days_remaining: float | None = None
    total_days: float | None = None
    total_weeks: float | None = None
    total_months: float | None = None

    status: DurationStatus = "ok"
    notes: list[str] = []

    @property
    def duration_defined(self) -> bool:
        return self.status == "ok"


class PhaseBreakdown(BaseModel):
    pre: float
    foundation: float
    structural: float
    finishes_remaining: float
    commissioning: float
    total: float


class EstimateResult(BaseModel):
    output: EstimatorOutput
    phases: PhaseBreakdown | None = None
