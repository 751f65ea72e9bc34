"""Display projections for entry fields.

Every optional numeric field renders as "" when it is absent or not positive,
otherwise with a fixed number of decimals. Nothing here mutates the entry.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from app.core.enums import BODY_MEASUREMENT_FIELDS, VITAL_FIELDS, MeasurementField


def is_set(value: Optional[float]) -> bool:
    """A stored value counts as provided only when it is present and > 0."""
    return value is not None and value > 0


def parse_optional_number(raw: Any) -> Optional[float]:
    """Parse user input into a float. Blank or unparseable input is None, never an error."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def format_measurement(value: Optional[float], precision: int = 1) -> str:
    """Render a value with `precision` decimals, or "" when it is not set."""
    if not is_set(value):
        return ""
    return f"{value:.{precision}f}"


def format_blood_pressure(systolic: Optional[float], diastolic: Optional[float]) -> str:
    """"S/D" with partial forms "S/-" and "-/D" when only one side was recorded."""
    if is_set(systolic) and is_set(diastolic):
        return f"{systolic:.0f}/{diastolic:.0f}"
    if is_set(systolic):
        return f"{systolic:.0f}/-"
    if is_set(diastolic):
        return f"-/{diastolic:.0f}"
    return ""


def has_measurements(entry) -> bool:
    return any(is_set(field.value_of(entry)) for field in BODY_MEASUREMENT_FIELDS)


def has_vital_signs(entry) -> bool:
    return any(is_set(field.value_of(entry)) for field in VITAL_FIELDS)


def entry_display(entry) -> dict[str, str]:
    """All display strings for an entry, keyed by field name, plus blood_pressure."""
    out = {
        field.value: format_measurement(field.value_of(entry), field.precision)
        for field in MeasurementField
    }
    out["blood_pressure"] = format_blood_pressure(entry.systolic_bp, entry.diastolic_bp)
    return out
