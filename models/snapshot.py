"""SQLModel table holding serialized board snapshots."""
from datetime import datetime

from sqlmodel import Field, SQLModel


class Snapshot(SQLModel, table=True):
    """One JSON document of ``{"tasks": [...], "categories": [...]}`` per key."""

    key: str = Field(primary_key=True)
    payload: str
    updated_at: datetime = Field(default_factory=datetime.now)


__all__ = ["Snapshot"]
