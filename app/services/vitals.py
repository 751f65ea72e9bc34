"""Vital sign classification: blood pressure and resting heart rate categories.

Pure functions over raw readings. A reading counts only when it is present
and positive; anything else classifies as UNKNOWN instead of raising.
"""

from __future__ import annotations

from typing import Optional

from app.core.constants import (
    BP_ELEVATED_SYSTOLIC_MAX,
    BP_NORMAL_DIASTOLIC_MAX,
    BP_NORMAL_SYSTOLIC_MAX,
    BP_STAGE_1_DIASTOLIC_MAX,
    BP_STAGE_1_SYSTOLIC_MAX,
    HR_NORMAL_MAX,
    HR_NORMAL_MIN,
)
from app.core.enums import BloodPressureCategory, HeartRateCategory, Severity


def _is_positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


def classify_blood_pressure(
    systolic: Optional[float], diastolic: Optional[float]
) -> BloodPressureCategory:
    """Categorise a blood pressure reading.

    Branches are evaluated top to bottom and the first match wins; the
    ranges overlap, e.g. 135/75 skips Elevated (systolic >= 130) and lands
    in Stage 1.
    """
    if not (_is_positive(systolic) and _is_positive(diastolic)):
        return BloodPressureCategory.UNKNOWN

    if systolic < BP_NORMAL_SYSTOLIC_MAX and diastolic < BP_NORMAL_DIASTOLIC_MAX:
        return BloodPressureCategory.NORMAL
    elif systolic < BP_ELEVATED_SYSTOLIC_MAX and diastolic < BP_NORMAL_DIASTOLIC_MAX:
        return BloodPressureCategory.ELEVATED
    elif (BP_ELEVATED_SYSTOLIC_MAX <= systolic < BP_STAGE_1_SYSTOLIC_MAX) or (
        BP_NORMAL_DIASTOLIC_MAX <= diastolic < BP_STAGE_1_DIASTOLIC_MAX
    ):
        return BloodPressureCategory.STAGE_1_HIGH
    elif systolic >= BP_STAGE_1_SYSTOLIC_MAX or diastolic >= BP_STAGE_1_DIASTOLIC_MAX:
        return BloodPressureCategory.STAGE_2_HIGH
    else:
        return BloodPressureCategory.UNKNOWN


def classify_heart_rate(bpm: Optional[float]) -> HeartRateCategory:
    """Categorise a resting heart rate; 60 and 100 are both Normal."""
    if not _is_positive(bpm):
        return HeartRateCategory.UNKNOWN
    if bpm < HR_NORMAL_MIN:
        return HeartRateCategory.LOW
    if bpm <= HR_NORMAL_MAX:
        return HeartRateCategory.NORMAL
    return HeartRateCategory.HIGH


# ── Severity ─────────────────────────────────────────────────────────────

# Separate tables: both enums use the "Normal" / "Unknown" string values.
BP_SEVERITY = {
    BloodPressureCategory.NORMAL: Severity.BENIGN,
    BloodPressureCategory.ELEVATED: Severity.CAUTION,
    BloodPressureCategory.STAGE_1_HIGH: Severity.WARNING,
    BloodPressureCategory.STAGE_2_HIGH: Severity.CRITICAL,
    BloodPressureCategory.UNKNOWN: Severity.NEUTRAL,
}

HR_SEVERITY = {
    HeartRateCategory.LOW: Severity.CAUTION,
    HeartRateCategory.NORMAL: Severity.BENIGN,
    HeartRateCategory.HIGH: Severity.CAUTION,
    HeartRateCategory.UNKNOWN: Severity.NEUTRAL,
}


def severity_of(category: BloodPressureCategory | HeartRateCategory) -> Severity:
    """Map a category to its severity."""
    if isinstance(category, BloodPressureCategory):
        return BP_SEVERITY[category]
    return HR_SEVERITY[category]
