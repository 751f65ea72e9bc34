"""Chart endpoints — measurement trend series with statistics, latest vital signs."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import defer

from app.core.enums import MeasurementField, TimeRange
from app.db.session import get_db
from app.models.entry import Entry
from app.schemas.charts import SeriesRead, VitalsSummary
from app.services.time_series import compute_series, compute_statistics, latest_vitals, range_cutoff

router = APIRouter()


@router.get("/series", response_model=SeriesRead)
async def get_series(
    field: MeasurementField = Query(MeasurementField.WEIGHT, description="Measurement to chart"),
    time_range: TimeRange = Query(TimeRange.MONTH, alias="range", description="1W, 1M, 3M, 6M, 1Y or All"),
    db: AsyncSession = Depends(get_db),
):
    """Points (oldest first) and current / average / change for one measurement.

    `statistics` is null when no entry in the window has a value for the field.
    """
    stmt = select(Entry).options(defer(Entry.photo))
    cutoff = range_cutoff(time_range.days)
    if cutoff is not None:
        stmt = stmt.where(Entry.date >= cutoff)
    entries = (await db.execute(stmt)).scalars().all()

    points = compute_series(entries, field, time_range.days)
    return SeriesRead(
        field=field,
        label=field.label,
        unit=field.unit,
        range=time_range,
        range_label=time_range.label,
        points=points,
        statistics=compute_statistics(points),
    )


@router.get("/vitals", response_model=Optional[VitalsSummary])
async def get_latest_vitals(db: AsyncSession = Depends(get_db)):
    """Blood pressure and heart rate of the latest entry with vitals, or null."""
    result = await db.execute(
        select(Entry)
        .options(defer(Entry.photo))
        .order_by(desc(Entry.date), desc(Entry.created_at))
    )
    return latest_vitals(result.scalars().all())
