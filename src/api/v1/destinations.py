"""Destination autocomplete suggestions."""

from fastapi import APIRouter

from dependencies.db import DbSession
from schemas.api import ApiResponse
from schemas.destinations import DestinationSuggestionRequest, DestinationSuggestions
from services.destinations import suggest_destinations


router = APIRouter(prefix="/destinations", tags=["destinations"])


@router.post("/suggestions", response_model=ApiResponse[DestinationSuggestions])
async def destination_suggestions(
    payload: DestinationSuggestionRequest, db: DbSession
) -> ApiResponse[DestinationSuggestions]:
    """Catalog matches for a partial destination name, most popular first.

    An empty query returns the most popular destinations. If the catalog is
    unreachable a built-in list is searched instead (``source="fallback"``).
    """
    suggestions = await suggest_destinations(db, payload.query, payload.limit)
    message = (
        "Destination suggestions retrieved"
        if suggestions.source == "catalog"
        else "Using fallback suggestions"
    )
    return ApiResponse(success=True, data=suggestions, message=message)
