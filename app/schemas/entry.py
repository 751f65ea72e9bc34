"""Entry schemas — form draft, create/update payloads and the read model."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.core.constants import INVALID_WEIGHT_MESSAGE, VITAL_MAX
from app.core.enums import (
    BODY_MEASUREMENT_FIELDS,
    VITAL_FIELDS,
    BloodPressureCategory,
    HeartRateCategory,
    Severity,
)
from app.services import display as fmt
from app.services import vitals

# Raw form input: whatever the user typed, or a number from a JSON client.
RawNumber = Optional[Union[float, str]]

MEASUREMENT_NAMES = tuple(f.value for f in BODY_MEASUREMENT_FIELDS)
VITAL_NAMES = tuple(f.value for f in VITAL_FIELDS)


class EntryValidationError(ValueError):
    """The entry cannot be saved; the message is shown to the user as-is."""


def _parse_weight(raw: Any) -> float:
    weight = fmt.parse_optional_number(raw)
    if weight is None or weight <= 0:
        raise EntryValidationError(INVALID_WEIGHT_MESSAGE)
    return weight


def _parse_whole(raw: Any) -> Optional[int]:
    """Vitals are whole numbers; "72.6" rounds to 73. Out-of-range readings are dropped."""
    value = fmt.parse_optional_number(raw)
    if value is None or abs(value) > VITAL_MAX:
        return None
    return int(round(value))


def _clean_notes(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    text = raw.strip()
    return text or None


def _parse_field(name: str, raw: Any) -> Any:
    if name == "weight":
        return _parse_weight(raw)
    if name in VITAL_NAMES:
        return _parse_whole(raw)
    if name == "notes":
        return _clean_notes(raw)
    return fmt.parse_optional_number(raw)


# ── Draft (form state) ───────────────────────────────────────────────────

class EntryDraft(BaseModel):
    """Immutable form state. Fields hold raw input and are only validated on submit()."""

    model_config = ConfigDict(frozen=True)

    date: Optional[dt.date] = Field(None, description="Entry date. Defaults to today on submit.")
    weight: RawNumber = Field(None, description="Body weight (lbs). Required on submit.")
    body_fat_pct: RawNumber = None
    muscle_mass: RawNumber = None
    waist: RawNumber = None
    chest: RawNumber = None
    arms: RawNumber = None
    hips: RawNumber = None
    legs: RawNumber = None
    neck: RawNumber = None
    systolic_bp: RawNumber = None
    diastolic_bp: RawNumber = None
    resting_heart_rate: RawNumber = None
    notes: Optional[str] = None

    def with_field(self, name: str, value: Any) -> "EntryDraft":
        """Return a copy with one field replaced."""
        if name not in type(self).model_fields:
            raise KeyError(name)
        return self.model_copy(update={name: value})

    def submit(self, today: Optional[dt.date] = None) -> "EntryCreate":
        """Validate the whole draft at once.

        Raises EntryValidationError when weight is missing, unparseable or not
        positive. Optional fields that fail to parse are dropped, not errors.
        """
        values = {
            name: _parse_field(name, getattr(self, name))
            for name in ("weight", *MEASUREMENT_NAMES, *VITAL_NAMES, "notes")
        }
        return EntryCreate(date=self.date or today or dt.date.today(), **values)


# ── Create / Update ──────────────────────────────────────────────────────

class EntryCreate(BaseModel):
    """Validated values ready to persist."""

    date: dt.date
    weight: float = Field(..., gt=0, description="Body weight in lbs")
    body_fat_pct: Optional[float] = None
    muscle_mass: Optional[float] = None
    waist: Optional[float] = None
    chest: Optional[float] = None
    arms: Optional[float] = None
    hips: Optional[float] = None
    legs: Optional[float] = None
    neck: Optional[float] = None
    systolic_bp: Optional[int] = None
    diastolic_bp: Optional[int] = None
    resting_heart_rate: Optional[int] = None
    notes: Optional[str] = None


class EntryUpdate(BaseModel):
    """Partial edit. Omitted fields keep their value; null or unparseable input clears them."""

    date: Optional[dt.date] = Field(None, description="Override the entry date")
    weight: RawNumber = None
    body_fat_pct: RawNumber = None
    muscle_mass: RawNumber = None
    waist: RawNumber = None
    chest: RawNumber = None
    arms: RawNumber = None
    hips: RawNumber = None
    legs: RawNumber = None
    neck: RawNumber = None
    systolic_bp: RawNumber = None
    diastolic_bp: RawNumber = None
    resting_heart_rate: RawNumber = None
    notes: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        """Parsed values for the fields the client actually sent."""
        out: dict[str, Any] = {}
        for name in self.model_fields_set:
            raw = getattr(self, name)
            if name == "date":
                # A date is always required; null means "leave it"
                if raw is not None:
                    out["date"] = raw
                continue
            out[name] = _parse_field(name, raw)
        return out


# ── Read ─────────────────────────────────────────────────────────────────

class EntryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    date: dt.date
    weight: float
    body_fat_pct: Optional[float] = None
    muscle_mass: Optional[float] = None
    waist: Optional[float] = None
    chest: Optional[float] = None
    arms: Optional[float] = None
    hips: Optional[float] = None
    legs: Optional[float] = None
    neck: Optional[float] = None
    systolic_bp: Optional[int] = None
    diastolic_bp: Optional[int] = None
    resting_heart_rate: Optional[int] = None
    notes: Optional[str] = None
    has_photo: bool = False
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    @computed_field
    @property
    def has_measurements(self) -> bool:
        return fmt.has_measurements(self)

    @computed_field
    @property
    def has_vital_signs(self) -> bool:
        return fmt.has_vital_signs(self)

    @computed_field
    @property
    def blood_pressure_category(self) -> BloodPressureCategory:
        return vitals.classify_blood_pressure(self.systolic_bp, self.diastolic_bp)

    @computed_field
    @property
    def blood_pressure_severity(self) -> Severity:
        return vitals.severity_of(self.blood_pressure_category)

    @computed_field
    @property
    def heart_rate_category(self) -> HeartRateCategory:
        return vitals.classify_heart_rate(self.resting_heart_rate)

    @computed_field
    @property
    def heart_rate_severity(self) -> Severity:
        return vitals.severity_of(self.heart_rate_category)

    @computed_field
    @property
    def display(self) -> dict[str, str]:
        """Formatted strings; empty when a field is not set."""
        return fmt.entry_display(self)
