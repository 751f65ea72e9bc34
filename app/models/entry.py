"""Entry model — one dated health observation with optional measurements, vitals and photo."""

from __future__ import annotations

import datetime as dt
import uuid

from sqlalchemy import Date, Float, Index, Integer, LargeBinary, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampMixin


class Entry(TimestampMixin, Base):
    """A single logged observation.

    Only date and weight are required. Optional numeric fields are nullable:
    absent is stored as NULL, not 0. The photo is kept inline as a blob.
    """

    __tablename__ = "entries"
    __table_args__ = (Index("ix_entries_date", "date"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)

    # Body measurements
    body_fat_pct: Mapped[float | None] = mapped_column(Float, nullable=True)
    muscle_mass: Mapped[float | None] = mapped_column(Float, nullable=True)
    waist: Mapped[float | None] = mapped_column(Float, nullable=True)
    chest: Mapped[float | None] = mapped_column(Float, nullable=True)
    arms: Mapped[float | None] = mapped_column(Float, nullable=True)
    hips: Mapped[float | None] = mapped_column(Float, nullable=True)
    legs: Mapped[float | None] = mapped_column(Float, nullable=True)
    neck: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Vital signs
    systolic_bp: Mapped[int | None] = mapped_column(Integer, nullable=True)  # mmHg
    diastolic_bp: Mapped[int | None] = mapped_column(Integer, nullable=True)  # mmHg
    resting_heart_rate: Mapped[int | None] = mapped_column(Integer, nullable=True)  # bpm

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    photo: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    photo_content_type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    @property
    def has_photo(self) -> bool:
        return self.photo is not None
