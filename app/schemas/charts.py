"""Chart schemas — point series, summary statistics and the vitals summary."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from app.core.enums import (
    BloodPressureCategory,
    HeartRateCategory,
    MeasurementField,
    Severity,
    TimeRange,
)


class Point(BaseModel):
    date: dt.date
    value: float


class Statistics(BaseModel):
    current: float = Field(..., description="Value of the most recent point")
    average: float = Field(..., description="Mean of all points in the window")
    change: float = Field(..., description="Most recent minus earliest point in the window")


class SeriesRead(BaseModel):
    field: MeasurementField
    label: str
    unit: str
    range: TimeRange
    range_label: str
    points: list[Point]
    # None when there are no points; zero is a real change value
    statistics: Optional[Statistics] = None


class VitalsSummary(BaseModel):
    """Vital signs of the most recent entry that recorded any."""

    date: dt.date
    blood_pressure: str
    blood_pressure_category: BloodPressureCategory
    blood_pressure_severity: Severity
    resting_heart_rate: str
    heart_rate_category: HeartRateCategory
    heart_rate_severity: Severity
