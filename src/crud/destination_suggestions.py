"""Read queries over the destination catalog."""

from collections.abc import Sequence

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import CatalogUnavailableError
from models.destination_suggestions import DestinationSuggestion


async def search_destinations(
    db: AsyncSession, query: str, limit: int
) -> Sequence[DestinationSuggestion]:
    """Catalog entries matching ``query``, most popular first.

    An empty (or whitespace-only) query returns the ``limit`` most popular
    entries. Otherwise name, country and description are matched
    case-insensitively as substrings.

    Raises:
        CatalogUnavailableError: the catalog could not be queried.
    """
    stmt = select(DestinationSuggestion)

    term = query.strip()
    if term:
        pattern = f"%{_escape_like(term)}%"
        stmt = stmt.where(
            or_(
                DestinationSuggestion.name.ilike(pattern, escape="\\"),
                DestinationSuggestion.country.ilike(pattern, escape="\\"),
                DestinationSuggestion.description.ilike(pattern, escape="\\"),
            )
        )

    stmt = stmt.order_by(
        DestinationSuggestion.popularity_score.desc(), DestinationSuggestion.name
    ).limit(limit)

    try:
        result = await db.execute(stmt)
    except (SQLAlchemyError, OSError) as exc:
        raise CatalogUnavailableError("Destination catalog query failed") from exc
    return result.scalars().all()


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
