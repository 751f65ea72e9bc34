from datetime import date, timedelta

import pytest

from app.core.enums import BloodPressureCategory, HeartRateCategory, MeasurementField, Severity, TimeRange
from app.models.entry import Entry
from app.schemas.charts import Point
from app.services.time_series import compute_series, compute_statistics, latest_vitals, range_cutoff
from app.services.vitals import classify_blood_pressure

TODAY = date(2026, 10, 18)


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


def test_range_cutoff():
    assert range_cutoff(None, TODAY) is None
    assert range_cutoff(7, TODAY) == date(2026, 10, 11)
    assert TimeRange.MONTH.days == 30
    assert TimeRange.ALL.days is None


def test_series_is_ascending_regardless_of_input_order():
    entries = [
        Entry(date=days_ago(1), weight=178.0),
        Entry(date=days_ago(10), weight=181.0),
        Entry(date=days_ago(5), weight=179.5),
    ]
    points = compute_series(entries, MeasurementField.WEIGHT, None, TODAY)
    assert [p.date for p in points] == [days_ago(10), days_ago(5), days_ago(1)]
    assert [p.value for p in points] == [181.0, 179.5, 178.0]


def test_series_filters_by_range_inclusive():
    entries = [
        Entry(date=days_ago(7), weight=180.0),
        Entry(date=days_ago(8), weight=181.0),
        Entry(date=TODAY, weight=179.0),
    ]
    points = compute_series(entries, "weight", 7, TODAY)
    assert [p.date for p in points] == [days_ago(7), TODAY]


def test_series_skips_unset_values():
    entries = [
        Entry(date=days_ago(3), weight=180.0, waist=32.0),
        Entry(date=days_ago(2), weight=179.0, waist=0.0),
        Entry(date=days_ago(1), weight=178.0),
    ]
    points = compute_series(entries, MeasurementField.WAIST, 30, TODAY)
    assert points == [Point(date=days_ago(3), value=32.0)]


def test_series_empty_for_field_never_recorded():
    entries = [Entry(date=days_ago(1), weight=178.0)]
    assert compute_series(entries, MeasurementField.CHEST, None, TODAY) == []


def test_series_unknown_field_rejected():
    with pytest.raises(ValueError):
        compute_series([], "shoe_size")


def test_statistics_empty_is_none():
    assert compute_statistics([]) is None


def test_statistics():
    points = [
        Point(date=days_ago(3), value=10),
        Point(date=days_ago(2), value=20),
        Point(date=days_ago(1), value=15),
    ]
    stats = compute_statistics(points)
    assert stats.current == 15
    assert stats.average == 15.0
    assert stats.change == 5


def test_statistics_single_point_has_zero_change():
    stats = compute_statistics([Point(date=TODAY, value=180.0)])
    assert stats is not None
    assert stats.current == 180.0
    assert stats.change == 0


def test_two_entry_month_scenario():
    first = Entry(date=days_ago(7), weight=180.5, systolic_bp=128, diastolic_bp=85, resting_heart_rate=72)
    second = Entry(date=days_ago(3), weight=179.2, systolic_bp=135, diastolic_bp=88, resting_heart_rate=78)

    points = compute_series([second, first], MeasurementField.WEIGHT, TimeRange.MONTH.days, TODAY)
    assert [p.value for p in points] == [180.5, 179.2]

    stats = compute_statistics(points)
    assert stats.current == pytest.approx(179.2)
    assert stats.average == pytest.approx(179.85)
    assert stats.change == pytest.approx(-1.3)

    assert classify_blood_pressure(first.systolic_bp, first.diastolic_bp) is BloodPressureCategory.STAGE_1_HIGH
    assert classify_blood_pressure(second.systolic_bp, second.diastolic_bp) is BloodPressureCategory.STAGE_1_HIGH


def test_latest_vitals_uses_most_recent_entry_with_vitals():
    entries = [
        Entry(date=days_ago(1), weight=178.0),
        Entry(date=days_ago(3), weight=179.2, systolic_bp=135, diastolic_bp=88, resting_heart_rate=78),
        Entry(date=days_ago(7), weight=180.5, systolic_bp=118, diastolic_bp=75),
    ]
    summary = latest_vitals(entries)
    assert summary.date == days_ago(3)
    assert summary.blood_pressure == "135/88"
    assert summary.blood_pressure_category is BloodPressureCategory.STAGE_1_HIGH
    assert summary.blood_pressure_severity is Severity.WARNING
    assert summary.resting_heart_rate == "78"
    assert summary.heart_rate_category is HeartRateCategory.NORMAL


def test_latest_vitals_partial_reading():
    summary = latest_vitals([Entry(date=TODAY, weight=178.0, systolic_bp=120)])
    assert summary.blood_pressure == "120/-"
    assert summary.blood_pressure_category is BloodPressureCategory.UNKNOWN
    assert summary.resting_heart_rate == ""
    assert summary.heart_rate_severity is Severity.NEUTRAL


def test_latest_vitals_none_without_vitals():
    assert latest_vitals([Entry(date=TODAY, weight=178.0)]) is None
    assert latest_vitals([]) is None
