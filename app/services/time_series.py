"""Chart data: filtered point series and summary statistics.

Everything here is a pure function over an already loaded snapshot of
entries, so the charts endpoint can run it after a single query.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from typing import Optional

from app.core.enums import MeasurementField
from app.schemas.charts import Point, Statistics, VitalsSummary
from app.services.display import format_blood_pressure, format_measurement, has_vital_signs, is_set
from app.services.vitals import classify_blood_pressure, classify_heart_rate, severity_of


def range_cutoff(range_days: Optional[int], today: Optional[date] = None) -> Optional[date]:
    """First date inside the window, or None for an unbounded range."""
    if range_days is None:
        return None
    return (today or date.today()) - timedelta(days=range_days)


def compute_series(
    entries: Iterable,
    field: MeasurementField | str,
    range_days: Optional[int] = None,
    today: Optional[date] = None,
) -> list[Point]:
    """Points for one field, oldest first.

    Keeps entries dated on or after the cutoff whose value for `field` is set
    (present and > 0). Input order does not matter.
    """
    field = MeasurementField(field)
    cutoff = range_cutoff(range_days, today)
    points: list[Point] = []
    for entry in entries:
        if cutoff is not None and entry.date < cutoff:
            continue
        value = field.value_of(entry)
        if not is_set(value):
            continue
        points.append(Point(date=entry.date, value=float(value)))
    points.sort(key=lambda p: p.date)
    return points


def compute_statistics(points: list[Point]) -> Optional[Statistics]:
    """Current / average / net change over an ascending series. None if empty."""
    if not points:
        return None
    values = [p.value for p in points]
    current = values[-1]
    return Statistics(
        current=current,
        average=sum(values) / len(values),
        change=current - values[0],
    )


def latest_vitals(entries: Iterable) -> Optional[VitalsSummary]:
    """Summary of the most recent entry with any vital sign recorded.

    Ties on date go to whichever entry comes first in `entries`.
    """
    latest = None
    for entry in entries:
        if not has_vital_signs(entry):
            continue
        if latest is None or entry.date > latest.date:
            latest = entry
    if latest is None:
        return None

    bp_category = classify_blood_pressure(latest.systolic_bp, latest.diastolic_bp)
    hr_category = classify_heart_rate(latest.resting_heart_rate)
    return VitalsSummary(
        date=latest.date,
        blood_pressure=format_blood_pressure(latest.systolic_bp, latest.diastolic_bp),
        blood_pressure_category=bp_category,
        blood_pressure_severity=severity_of(bp_category),
        resting_heart_rate=format_measurement(
            latest.resting_heart_rate, MeasurementField.RESTING_HEART_RATE.precision
        ),
        heart_rate_category=hr_category,
        heart_rate_severity=severity_of(hr_category),
    )
