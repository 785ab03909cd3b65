"""Destination catalog model backing autocomplete suggestions."""

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class DestinationSuggestion(Base):
    """A well-known destination offered while the traveller types.

    Read-only from the application's point of view; rows are seeded by
    migration and ranked by ``popularity_score``.
    """

    __tablename__ = "destination_suggestions"

    id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    country: Mapped[str] = mapped_column(String(200), nullable=False)
    continent: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    popular_for: Mapped[list[str]] = mapped_column(
        JSONB, nullable=False, default=list, comment="Tags such as Art, Food"
    )
    best_time: Mapped[str | None] = mapped_column(String(100), nullable=True)
    coordinates: Mapped[dict[str, Any] | None] = mapped_column(
        JSONB, nullable=True, comment='{"lat": float, "lng": float}'
    )
    popularity_score: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    def __repr__(self) -> str:
        return (
            f"<DestinationSuggestion(name={self.name}, "
            f"popularity_score={self.popularity_score})>"
        )
