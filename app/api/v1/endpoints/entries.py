"""Entry endpoints — create from a form draft, history, edit, delete, progress photo."""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.constants import ENTRY_NOT_FOUND_MESSAGE
from app.db.session import get_db
from app.models.entry import Entry
from app.schemas.entry import EntryDraft, EntryRead, EntryUpdate, EntryValidationError
from app.services.time_series import range_cutoff

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()


async def get_entry_or_404(db: AsyncSession, entry_id: uuid.UUID) -> Entry:
    result = await db.execute(select(Entry).where(Entry.id == entry_id))
    entry = result.scalar_one_or_none()
    if not entry:
        raise HTTPException(status_code=404, detail=ENTRY_NOT_FOUND_MESSAGE)
    return entry


async def commit_or_500(db: AsyncSession, action: str) -> None:
    """Commit, or roll back and report a storage failure. Nothing is retried."""
    try:
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Storage failure while %s entry", action)
        raise HTTPException(status_code=500, detail=f"Error {action} entry")


# ── Entries ──────────────────────────────────────────────────────────────

@router.post("", response_model=EntryRead, status_code=201)
async def create_entry(payload: EntryDraft, db: AsyncSession = Depends(get_db)):
    """Validate the submitted form as a whole and store it. Weight is required and must be > 0."""
    try:
        values = payload.submit()
    except EntryValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    entry = Entry(**values.model_dump())
    db.add(entry)
    await commit_or_500(db, "saving")
    await db.refresh(entry)
    logger.info("Created entry %s for %s", entry.id, entry.date)
    return entry


@router.get("", response_model=list[EntryRead])
async def list_entries(
    days: Optional[int] = Query(None, ge=0, description="Only entries from the last N days. Omit for all."),
    db: AsyncSession = Depends(get_db),
):
    """History, most recent first. Entries on the same date: newest created first."""
    stmt = select(Entry).order_by(desc(Entry.date), desc(Entry.created_at))
    cutoff = range_cutoff(days)
    if cutoff is not None:
        stmt = stmt.where(Entry.date >= cutoff)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.get("/{entry_id}", response_model=EntryRead)
async def get_entry(entry_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await get_entry_or_404(db, entry_id)


@router.patch("/{entry_id}", response_model=EntryRead)
async def update_entry(entry_id: uuid.UUID, payload: EntryUpdate, db: AsyncSession = Depends(get_db)):
    """Edit an entry. Only the fields present in the body change."""
    entry = await get_entry_or_404(db, entry_id)
    try:
        changes = payload.changes()
    except EntryValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    for name, value in changes.items():
        setattr(entry, name, value)
    await commit_or_500(db, "updating")
    await db.refresh(entry)
    logger.info("Updated entry %s (%s)", entry.id, ", ".join(sorted(changes)) or "no changes")
    return entry


@router.delete("/{entry_id}", status_code=204)
async def delete_entry(entry_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    entry = await get_entry_or_404(db, entry_id)
    await db.delete(entry)
    await commit_or_500(db, "deleting")
    logger.info("Deleted entry %s", entry_id)


# ── Photo ────────────────────────────────────────────────────────────────

async def read_photo(request: Request, limit: int) -> bytes:
    """Read the request body, stopping with 413 as soon as it exceeds `limit` bytes."""
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise HTTPException(status_code=413, detail="Photo is too large")
    data = bytearray()
    async for chunk in request.stream():
        data.extend(chunk)
        if len(data) > limit:
            raise HTTPException(status_code=413, detail="Photo is too large")
    return bytes(data)


@router.put("/{entry_id}/photo", response_model=EntryRead)
async def put_photo(entry_id: uuid.UUID, request: Request, db: AsyncSession = Depends(get_db)):
    """Attach a progress photo. The request body is the raw image (Content-Type: image/*)."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=415, detail="Photo must be an image")
    data = await read_photo(request, settings.max_photo_bytes)
    if not data:
        raise HTTPException(status_code=400, detail="Photo is empty")

    entry = await get_entry_or_404(db, entry_id)
    entry.photo = data
    entry.photo_content_type = content_type
    await commit_or_500(db, "saving")
    await db.refresh(entry)
    logger.info("Attached %d byte photo to entry %s", len(data), entry.id)
    return entry


@router.get("/{entry_id}/photo")
async def get_photo(entry_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    entry = await get_entry_or_404(db, entry_id)
    if entry.photo is None:
        raise HTTPException(status_code=404, detail="Entry has no photo")
    return Response(content=entry.photo, media_type=entry.photo_content_type or "application/octet-stream")


@router.delete("/{entry_id}/photo", status_code=204)
async def delete_photo(entry_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    entry = await get_entry_or_404(db, entry_id)
    entry.photo = None
    entry.photo_content_type = None
    await commit_or_500(db, "updating")
