"""Destination catalog search schemas."""

from typing import Literal

from pydantic import Field

from .common import CamelModel, Coordinates


DEFAULT_SUGGESTION_LIMIT = 10
MAX_SUGGESTION_LIMIT = 50


class DestinationSuggestionRequest(CamelModel):
    query: str = Field("", max_length=200)
    limit: int = Field(DEFAULT_SUGGESTION_LIMIT, ge=1, le=MAX_SUGGESTION_LIMIT)


class DestinationSuggestion(CamelModel):
    name: str
    country: str
    continent: str
    description: str | None = None
    popular_for: list[str] = Field(default_factory=list)
    best_time: str | None = None
    coordinates: Coordinates | None = None
    popularity_score: int = 0


class DestinationSuggestions(CamelModel):
    suggestions: list[DestinationSuggestion]
    source: Literal["catalog", "fallback"] = "catalog"
