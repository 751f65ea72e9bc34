"""Shared enums for models and API."""

from enum import Enum


class BloodPressureCategory(str, Enum):
    """Blood pressure reading category."""

    NORMAL = "Normal"
    ELEVATED = "Elevated"
    STAGE_1_HIGH = "Stage 1 High"
    STAGE_2_HIGH = "Stage 2 High"
    UNKNOWN = "Unknown"  # Missing reading, or "check with doctor"


class HeartRateCategory(str, Enum):
    """Resting heart rate category."""

    LOW = "Low (Bradycardia)"
    NORMAL = "Normal"
    HIGH = "High (Tachycardia)"
    UNKNOWN = "Unknown"


class Severity(str, Enum):
    """How worrying a category is. Drives the color a client shows."""

    BENIGN = "benign"
    CAUTION = "caution"
    WARNING = "warning"
    CRITICAL = "critical"
    NEUTRAL = "neutral"  # No data

    @property
    def color(self) -> str:
        return SEVERITY_COLORS[self]


SEVERITY_COLORS = {
    Severity.BENIGN: "green",
    Severity.CAUTION: "yellow",
    Severity.WARNING: "orange",
    Severity.CRITICAL: "red",
    Severity.NEUTRAL: "gray",
}


class TimeRange(str, Enum):
    """Chart time window."""

    WEEK = "1W"
    MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    YEAR = "1Y"
    ALL = "All"

    @property
    def days(self) -> int | None:
        """Days to look back, None for the whole history."""
        return TIME_RANGE_DAYS[self]

    @property
    def label(self) -> str:
        return TIME_RANGE_LABELS[self]


TIME_RANGE_DAYS = {
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
    TimeRange.THREE_MONTHS: 90,
    TimeRange.SIX_MONTHS: 180,
    TimeRange.YEAR: 365,
    TimeRange.ALL: None,
}

TIME_RANGE_LABELS = {
    TimeRange.WEEK: "1 Week",
    TimeRange.MONTH: "1 Month",
    TimeRange.THREE_MONTHS: "3 Months",
    TimeRange.SIX_MONTHS: "6 Months",
    TimeRange.YEAR: "1 Year",
    TimeRange.ALL: "All Time",
}


class MeasurementField(str, Enum):
    """Numeric entry field that can be charted. Values match Entry attribute names."""

    WEIGHT = "weight"
    BODY_FAT_PCT = "body_fat_pct"
    MUSCLE_MASS = "muscle_mass"
    WAIST = "waist"
    CHEST = "chest"
    ARMS = "arms"
    HIPS = "hips"
    LEGS = "legs"
    NECK = "neck"
    SYSTOLIC_BP = "systolic_bp"
    DIASTOLIC_BP = "diastolic_bp"
    RESTING_HEART_RATE = "resting_heart_rate"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]

    @property
    def unit(self) -> str:
        return FIELD_UNITS[self]

    @property
    def precision(self) -> int:
        """Decimal places used for display: whole numbers for vitals."""
        return 0 if self in VITAL_FIELDS else 1

    def value_of(self, entry) -> float | None:
        return getattr(entry, self.value, None)


FIELD_LABELS = {
    MeasurementField.WEIGHT: "Weight",
    MeasurementField.BODY_FAT_PCT: "Body Fat %",
    MeasurementField.MUSCLE_MASS: "Muscle Mass",
    MeasurementField.WAIST: "Waist",
    MeasurementField.CHEST: "Chest",
    MeasurementField.ARMS: "Arms",
    MeasurementField.HIPS: "Hips",
    MeasurementField.LEGS: "Legs",
    MeasurementField.NECK: "Neck",
    MeasurementField.SYSTOLIC_BP: "Systolic BP",
    MeasurementField.DIASTOLIC_BP: "Diastolic BP",
    MeasurementField.RESTING_HEART_RATE: "Resting Heart Rate",
}

FIELD_UNITS = {
    MeasurementField.WEIGHT: "lbs",
    MeasurementField.BODY_FAT_PCT: "%",
    MeasurementField.MUSCLE_MASS: "lbs",
    MeasurementField.WAIST: "in",
    MeasurementField.CHEST: "in",
    MeasurementField.ARMS: "in",
    MeasurementField.HIPS: "in",
    MeasurementField.LEGS: "in",
    MeasurementField.NECK: "in",
    MeasurementField.SYSTOLIC_BP: "mmHg",
    MeasurementField.DIASTOLIC_BP: "mmHg",
    MeasurementField.RESTING_HEART_RATE: "bpm",
}

# Body measurements (everything optional besides weight and vitals)
BODY_MEASUREMENT_FIELDS = (
    MeasurementField.BODY_FAT_PCT,
    MeasurementField.MUSCLE_MASS,
    MeasurementField.WAIST,
    MeasurementField.CHEST,
    MeasurementField.ARMS,
    MeasurementField.HIPS,
    MeasurementField.LEGS,
    MeasurementField.NECK,
)

VITAL_FIELDS = (
    MeasurementField.SYSTOLIC_BP,
    MeasurementField.DIASTOLIC_BP,
    MeasurementField.RESTING_HEART_RATE,
)
