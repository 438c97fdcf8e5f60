# vasstra/models/storage.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class StorageEntry(SQLModel, table=True):
    """
    One persisted client-state blob.

    The value is an opaque JSON string owned by a single store
    (cart, wishlist, recently viewed, reviews, session).
    """

    __tablename__ = "storage_entries"

    key: str = Field(
        primary_key=True,
        max_length=100,
    )

    value: str = Field(
        description="Serialized JSON payload",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last write timestamp (UTC)",
    )
