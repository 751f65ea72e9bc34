"""Demo entries for an empty store."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.entry import Entry

logger = logging.getLogger(__name__)


def sample_entries(today: Optional[date] = None) -> list[Entry]:
    """Two entries a few days apart with weight, vitals and one measurement each."""
    today = today or date.today()
    return [
        Entry(
            date=today - timedelta(days=7),
            weight=180.5,
            systolic_bp=128,
            diastolic_bp=85,
            resting_heart_rate=72,
            body_fat_pct=18.5,
            notes="Feeling good this week!",
        ),
        Entry(
            date=today - timedelta(days=3),
            weight=179.2,
            systolic_bp=135,
            diastolic_bp=88,
            resting_heart_rate=78,
            muscle_mass=140.0,
            notes="Good workout today",
        ),
    ]


async def seed_sample_entries(db: AsyncSession, today: Optional[date] = None) -> int:
    """Insert the demo entries if there are no entries yet. Returns how many were added."""
    count = (await db.execute(select(func.count()).select_from(Entry))).scalar_one()
    if count:
        return 0
    entries = sample_entries(today)
    db.add_all(entries)
    await db.commit()
    logger.info("Seeded %d sample entries", len(entries))
    return len(entries)
