"""AI-assisted travel endpoints: chat, itineraries and local recommendations.

Every endpoint answers 200 with a complete payload. When the provider could
not be used the payload is the feature's canned fallback; the envelope
``message`` and the ``X-AI-Provenance`` header say which one the caller got.
"""

from __future__ import annotations

from typing import TypeVar

from fastapi import APIRouter, Response

from dependencies.ai import AIPipelineDep
from schemas.api import ApiResponse
from schemas.chat import ChatReply, ChatRequest
from schemas.itineraries import (
    DetailedDestinationPlan,
    DetailedItineraryRequest,
    Itinerary,
    ItineraryRequest,
)
from schemas.recommendations import LocationRecommendations, LocationRecommendationsRequest
from services.ai import travel_assistant
from services.ai.models import Fallback, Parsed


router = APIRouter(prefix="/ai", tags=["ai"])

PROVENANCE_HEADER = "X-AI-Provenance"

PARSED_MESSAGE = "Generated by the AI travel assistant"
FALLBACK_MESSAGE = "AI assistant unavailable; returning standard travel guidance"

T = TypeVar("T")


def _envelope(result: Parsed[T] | Fallback[T], response: Response) -> ApiResponse[T]:
    response.headers[PROVENANCE_HEADER] = result.provenance
    message = PARSED_MESSAGE if isinstance(result, Parsed) else FALLBACK_MESSAGE
    return ApiResponse(success=True, data=result.value, message=message)


@router.post("/travel-chat", response_model=ApiResponse[ChatReply])
async def travel_chat(
    payload: ChatRequest, response: Response, pipeline: AIPipelineDep
) -> ApiResponse[ChatReply]:
    result = await travel_assistant.travel_chat(pipeline, payload.messages)
    return _envelope(result, response)


@router.post("/travel-expert-chat", response_model=ApiResponse[ChatReply])
async def travel_expert_chat(
    payload: ChatRequest, response: Response, pipeline: AIPipelineDep
) -> ApiResponse[ChatReply]:
    result = await travel_assistant.travel_expert_chat(pipeline, payload.messages)
    return _envelope(result, response)


@router.post("/generate-itinerary", response_model=ApiResponse[Itinerary])
async def generate_itinerary(
    payload: ItineraryRequest, response: Response, pipeline: AIPipelineDep
) -> ApiResponse[Itinerary]:
    """Day-by-day plan across one or more destinations."""
    result = await travel_assistant.generate_itinerary(pipeline, payload)
    return _envelope(result, response)


@router.post(
    "/comprehensive-itinerary", response_model=ApiResponse[DetailedDestinationPlan]
)
async def comprehensive_itinerary(
    payload: DetailedItineraryRequest, response: Response, pipeline: AIPipelineDep
) -> ApiResponse[DetailedDestinationPlan]:
    """Full single-destination plan with hotels, dining, transport and costs."""
    result = await travel_assistant.comprehensive_itinerary(pipeline, payload)
    return _envelope(result, response)


@router.post(
    "/location-recommendations", response_model=ApiResponse[LocationRecommendations]
)
async def location_recommendations(
    payload: LocationRecommendationsRequest,
    response: Response,
    pipeline: AIPipelineDep,
) -> ApiResponse[LocationRecommendations]:
    result = await travel_assistant.location_recommendations(pipeline, payload)
    return _envelope(result, response)
