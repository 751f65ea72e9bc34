import pytest

from app.models.entry import Entry
from app.services.display import (
    entry_display,
    format_blood_pressure,
    format_measurement,
    has_measurements,
    has_vital_signs,
    is_set,
    parse_optional_number,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("180.5", 180.5),
        (" 72 ", 72.0),
        (15, 15.0),
        (0, 0.0),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("12,5", None),
        ("nan", None),
        ("inf", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_optional_number(raw, expected):
    assert parse_optional_number(raw) == expected


def test_is_set():
    assert is_set(0.1)
    assert not is_set(0)
    assert not is_set(-3)
    assert not is_set(None)


def test_format_measurement():
    assert format_measurement(180.46) == "180.5"
    assert format_measurement(32) == "32.0"
    assert format_measurement(72, 0) == "72"
    assert format_measurement(0) == ""
    assert format_measurement(None) == ""
    assert format_measurement(-2.5) == ""


@pytest.mark.parametrize("value", [0.1, 15.2, 179.24, 180.5, 250.04])
def test_format_then_parse_one_decimal(value):
    assert parse_optional_number(format_measurement(value, 1)) == pytest.approx(value, abs=0.05)


@pytest.mark.parametrize("value", [45, 72, 119.4, 140])
def test_format_then_parse_whole(value):
    assert parse_optional_number(format_measurement(value, 0)) == pytest.approx(value, abs=0.5)


def test_format_blood_pressure():
    assert format_blood_pressure(120, 80) == "120/80"
    assert format_blood_pressure(120, None) == "120/-"
    assert format_blood_pressure(None, 80) == "-/80"
    assert format_blood_pressure(0, 80) == "-/80"
    assert format_blood_pressure(None, None) == ""


def test_has_measurements_and_vitals():
    entry = Entry(weight=180.0)
    assert not has_measurements(entry)
    assert not has_vital_signs(entry)

    entry.neck = 0.0
    assert not has_measurements(entry)
    entry.neck = 15.5
    assert has_measurements(entry)

    entry.diastolic_bp = 80
    assert has_vital_signs(entry)


def test_entry_display():
    entry = Entry(weight=179.2, waist=32.04, systolic_bp=135, resting_heart_rate=78)
    out = entry_display(entry)
    assert out["weight"] == "179.2"
    assert out["waist"] == "32.0"
    assert out["chest"] == ""
    assert out["systolic_bp"] == "135"
    assert out["diastolic_bp"] == ""
    assert out["blood_pressure"] == "135/-"
    assert out["resting_heart_rate"] == "78"
