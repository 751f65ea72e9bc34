"""Classification tools: categorise a reading without storing it (pure logic, no DB)."""

import math
from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from app.core.enums import BloodPressureCategory, HeartRateCategory, Severity
from app.services.display import format_blood_pressure, format_measurement
from app.services.vitals import classify_blood_pressure, classify_heart_rate, severity_of

router = APIRouter()


def _whole(value: Optional[float]) -> Optional[int]:
    """Readings are classified as the whole number they display as, like stored vitals."""
    if value is None or not math.isfinite(value):
        return None
    return int(round(value))


class BloodPressureResponse(BaseModel):
    display: str  # "120/80", "120/-", "-/80" or ""
    category: BloodPressureCategory
    severity: Severity
    color: str


class HeartRateResponse(BaseModel):
    display: str
    category: HeartRateCategory
    severity: Severity
    color: str


@router.get("/blood-pressure", response_model=BloodPressureResponse)
def blood_pressure(
    systolic: Optional[float] = Query(None, description="Systolic mmHg"),
    diastolic: Optional[float] = Query(None, description="Diastolic mmHg"),
):
    """Both values are needed for a category; a single value still displays."""
    systolic, diastolic = _whole(systolic), _whole(diastolic)
    category = classify_blood_pressure(systolic, diastolic)
    severity = severity_of(category)
    return BloodPressureResponse(
        display=format_blood_pressure(systolic, diastolic),
        category=category,
        severity=severity,
        color=severity.color,
    )


@router.get("/heart-rate", response_model=HeartRateResponse)
def heart_rate(bpm: Optional[float] = Query(None, description="Resting heart rate")):
    bpm = _whole(bpm)
    category = classify_heart_rate(bpm)
    severity = severity_of(category)
    return HeartRateResponse(
        display=format_measurement(bpm, 0),
        category=category,
        severity=severity,
        color=severity.color,
    )
