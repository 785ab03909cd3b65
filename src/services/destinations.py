"""Destination suggestions: persisted catalog first, static list second."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from core.error_handler import StructuredLogger
from core.exceptions import CatalogUnavailableError
from crud.destination_suggestions import search_destinations
from models.destination_suggestions import DestinationSuggestion as DestinationRow
from schemas.common import Coordinates
from schemas.destinations import (
    DEFAULT_SUGGESTION_LIMIT,
    DestinationSuggestion,
    DestinationSuggestions,
)


logger = StructuredLogger(__name__)


def _entry(
    name: str,
    country: str,
    continent: str,
    description: str,
    popular_for: list[str],
    best_time: str,
    lat: float,
    lng: float,
    score: int,
) -> DestinationSuggestion:
    return DestinationSuggestion(
        name=name,
        country=country,
        continent=continent,
        description=description,
        popular_for=popular_for,
        best_time=best_time,
        coordinates=Coordinates(lat=lat, lng=lng),
        popularity_score=score,
    )


# Mirrors the rows seeded by the catalog migration
STATIC_CATALOG: tuple[DestinationSuggestion, ...] = (
    _entry("Paris", "France", "Europe", "City of Light and Love",
           ["Art", "Culture", "Romance", "Food"], "Apr-Jun, Sep-Oct", 48.8566, 2.3522, 100),
    _entry("Tokyo", "Japan", "Asia", "Modern Metropolis",
           ["Technology", "Food", "Culture", "Shopping"], "Mar-May, Sep-Nov", 35.6762, 139.6503, 95),
    _entry("New York", "United States", "North America", "The Big Apple",
           ["Culture", "Broadway", "Food", "Museums"], "Apr-Jun, Sep-Nov", 40.7128, -74.0060, 90),
    _entry("London", "United Kingdom", "Europe", "Historic Capital",
           ["History", "Museums", "Theater", "Culture"], "May-Sep", 51.5074, -0.1278, 85),
    _entry("Rome", "Italy", "Europe", "Eternal City",
           ["History", "Architecture", "Food", "Art"], "Apr-Jun, Sep-Oct", 41.9028, 12.4964, 80),
    _entry("Barcelona", "Spain", "Europe", "Gaudi's Masterpiece",
           ["Architecture", "Beaches", "Nightlife", "Food"], "May-Jun, Sep-Oct", 41.3851, 2.1734, 75),
    _entry("Bangkok", "Thailand", "Asia", "City of Angels",
           ["Street Food", "Temples", "Nightlife", "Shopping"], "Nov-Mar", 13.7563, 100.5018, 70),
    _entry("Sydney", "Australia", "Oceania", "Harbour City",
           ["Opera House", "Beaches", "Culture", "Nature"], "Sep-Nov, Mar-May", -33.8688, 151.2093, 65),
    _entry("Dubai", "United Arab Emirates", "Asia", "City of Gold",
           ["Luxury", "Shopping", "Architecture", "Desert"], "Nov-Mar", 25.2048, 55.2708, 60),
    _entry("Singapore", "Singapore", "Asia", "Garden City",
           ["Food", "Shopping", "Architecture", "Gardens"], "Feb-Apr", 1.3521, 103.8198, 55),
)  # fmt: skip


def static_suggestions(
    query: str, limit: int = DEFAULT_SUGGESTION_LIMIT
) -> list[DestinationSuggestion]:
    """Filter the static catalog by name, country, continent or tag."""
    term = query.strip().lower()

    def matches(entry: DestinationSuggestion) -> bool:
        if not term:
            return True
        haystacks = [entry.name, entry.country, entry.continent, *entry.popular_for]
        return any(term in value.lower() for value in haystacks)

    ranked = sorted(
        (entry for entry in STATIC_CATALOG if matches(entry)),
        key=lambda entry: (-entry.popularity_score, entry.name),
    )
    return ranked[:limit]


def _from_row(row: DestinationRow) -> DestinationSuggestion:
    coordinates = row.coordinates or None
    return DestinationSuggestion(
        name=row.name,
        country=row.country,
        continent=row.continent,
        description=row.description,
        popular_for=list(row.popular_for or []),
        best_time=row.best_time,
        coordinates=Coordinates.model_validate(coordinates) if coordinates else None,
        popularity_score=row.popularity_score,
    )


async def suggest_destinations(
    db: AsyncSession, query: str, limit: int = DEFAULT_SUGGESTION_LIMIT
) -> DestinationSuggestions:
    """Suggestions for ``query``; never fails because the catalog is down."""
    try:
        rows = await search_destinations(db, query, limit)
    except CatalogUnavailableError as exc:
        logger.warning(
            "Destination catalog unavailable, serving static suggestions",
            error_type=type(exc.__cause__ or exc).__name__,
        )
        return DestinationSuggestions(
            suggestions=static_suggestions(query, limit), source="fallback"
        )

    return DestinationSuggestions(
        suggestions=[_from_row(row) for row in rows], source="catalog"
    )
