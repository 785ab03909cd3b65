"""AI-backed travel features.

Each feature builds an ``AIRequest`` (prompts plus sampling parameters),
picks its result shape, extraction strategy and fallback builder, and runs
the shared pipeline. None of them raise for provider trouble; callers look at
``result.provenance`` to tell a generated answer from a canned one.
"""

from __future__ import annotations

from functools import partial

from schemas.chat import ChatMessageIn, ChatReply
from schemas.itineraries import (
    DetailedDestinationPlan,
    DetailedItineraryRequest,
    Itinerary,
    ItineraryRequest,
)
from schemas.recommendations import LocationRecommendations, LocationRecommendationsRequest
from services.ai import fallbacks, prompts
from services.ai.extraction import PlainTextExtractor
from services.ai.models import AIRequest, ChatTurn, Fallback, Parsed
from services.ai.pipeline import AIPipeline


_chat_extractor = PlainTextExtractor(field="response")


def _conversation(system_prompt: str, messages: list[ChatMessageIn]) -> tuple[ChatTurn, ...]:
    return (
        ChatTurn(role="system", content=system_prompt),
        *(ChatTurn(role=m.role, content=m.content) for m in messages),
    )


def _single_turn(system_prompt: str, user_prompt: str) -> tuple[ChatTurn, ...]:
    return (
        ChatTurn(role="system", content=system_prompt),
        ChatTurn(role="user", content=user_prompt),
    )


async def travel_chat(
    pipeline: AIPipeline, messages: list[ChatMessageIn]
) -> Parsed[ChatReply] | Fallback[ChatReply]:
    """General travel assistant conversation."""
    request = AIRequest(
        messages=_conversation(prompts.TRAVEL_CHAT_PROMPT, messages),
        shape="travel_chat",
        temperature=0.8,
        max_tokens=1000,
    )
    return await pipeline.run(
        request, ChatReply, fallbacks.travel_chat_fallback, extractor=_chat_extractor
    )


async def travel_expert_chat(
    pipeline: AIPipeline, messages: list[ChatMessageIn]
) -> Parsed[ChatReply] | Fallback[ChatReply]:
    """Concierge-style conversation with more detailed answers."""
    request = AIRequest(
        messages=_conversation(prompts.TRAVEL_EXPERT_PROMPT, messages),
        shape="travel_expert_chat",
        temperature=0.8,
        max_tokens=1200,
    )
    return await pipeline.run(
        request, ChatReply, fallbacks.travel_expert_fallback, extractor=_chat_extractor
    )


async def generate_itinerary(
    pipeline: AIPipeline, payload: ItineraryRequest
) -> Parsed[Itinerary] | Fallback[Itinerary]:
    request = AIRequest(
        messages=_single_turn(
            prompts.ITINERARY_PROMPT, prompts.itinerary_user_prompt(payload)
        ),
        shape="itinerary",
        temperature=0.7,
        max_tokens=4000,
    )
    return await pipeline.run(
        request, Itinerary, partial(fallbacks.build_itinerary_fallback, payload)
    )


async def comprehensive_itinerary(
    pipeline: AIPipeline, payload: DetailedItineraryRequest
) -> Parsed[DetailedDestinationPlan] | Fallback[DetailedDestinationPlan]:
    request = AIRequest(
        messages=_single_turn(
            prompts.COMPREHENSIVE_PROMPT, prompts.comprehensive_user_prompt(payload)
        ),
        shape="comprehensive_itinerary",
        temperature=0.7,
        max_tokens=4000,
    )
    return await pipeline.run(
        request,
        DetailedDestinationPlan,
        partial(fallbacks.build_comprehensive_fallback, payload),
    )


async def location_recommendations(
    pipeline: AIPipeline, payload: LocationRecommendationsRequest
) -> Parsed[LocationRecommendations] | Fallback[LocationRecommendations]:
    request = AIRequest(
        messages=_single_turn(
            prompts.LOCATION_PROMPT,
            prompts.location_user_prompt(
                payload.destination, payload.previous_destination
            ),
        ),
        shape="location_recommendations",
        temperature=0.7,
        max_tokens=3000,
    )
    return await pipeline.run(
        request,
        LocationRecommendations,
        partial(fallbacks.build_location_fallback, payload.destination),
    )
