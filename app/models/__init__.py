"""ORM models - import all so Base.metadata is complete for create_all."""

from app.models.entry import Entry

__all__ = ["Entry"]
