"""End-to-end pipeline runs over a mock provider transport."""

from __future__ import annotations

import asyncio
from datetime import date

import httpx
import pytest

from conftest import RecordingSleep, completion_response, json_completion, make_pipeline
from core.config import Settings
from schemas.chat import ChatMessageIn
from schemas.itineraries import DetailedItineraryRequest
from schemas.recommendations import LocationRecommendationsRequest
from services.ai import travel_assistant
from services.ai.fallbacks import (
    TRAVEL_CHAT_FALLBACK,
    build_comprehensive_fallback,
    build_location_fallback,
)
from services.ai.models import Fallback, Parsed
from services.ai.pipeline import build_pipeline


def _messages() -> list[ChatMessageIn]:
    return [ChatMessageIn(role="user", content="Where should I go in October?")]


@pytest.mark.asyncio
async def test_chat_reply_is_parsed() -> None:
    pipeline = make_pipeline(lambda _: completion_response("Try Kyoto for autumn leaves."))

    result = await travel_assistant.travel_chat(pipeline, _messages())

    assert isinstance(result, Parsed)
    assert result.value.response == "Try Kyoto for autumn leaves."


@pytest.mark.asyncio
async def test_chat_without_key_serves_canned_message() -> None:
    pipeline = make_pipeline(lambda _: completion_response("unused"), api_key=None)

    result = await travel_assistant.travel_chat(pipeline, _messages())

    assert isinstance(result, Fallback)
    assert result.reason == "not_configured"
    assert result.value.response == TRAVEL_CHAT_FALLBACK


@pytest.mark.asyncio
async def test_retries_then_parses_location_payload() -> None:
    payload = build_location_fallback("Seville").model_dump(by_alias=True)
    payload["tips"] = ["Siesta is real: plan around 2-5pm"]
    responses = iter([httpx.Response(502), json_completion(payload)])
    sleep = RecordingSleep()
    pipeline = make_pipeline(lambda _: next(responses), sleep=sleep)

    result = await travel_assistant.location_recommendations(
        pipeline, LocationRecommendationsRequest(destination="Seville")
    )

    assert isinstance(result, Parsed)
    assert result.value.tips == ["Siesta is real: plan around 2-5pm"]
    assert sleep.delays == [1.0]


@pytest.mark.asyncio
async def test_deadline_cancels_pending_backoff() -> None:
    calls: list[httpx.Request] = []

    def always_busy(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503)

    # Real asyncio.sleep: the first 1s backoff outlives the 50ms deadline
    pipeline = make_pipeline(always_busy, sleep=asyncio.sleep, deadline_seconds=0.05)
    request = DetailedItineraryRequest(
        destination="Paris", duration=3, start_date=date(2025, 6, 10), budget="luxury"
    )

    result = await travel_assistant.comprehensive_itinerary(pipeline, request)

    assert isinstance(result, Fallback)
    assert result.reason == "deadline_exceeded"
    assert result.value == build_comprehensive_fallback(request)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_deadline_cancels_slow_provider_call() -> None:
    async def slow(_: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return completion_response("too late")

    pipeline = make_pipeline(slow, deadline_seconds=0.05)

    result = await travel_assistant.travel_expert_chat(pipeline, _messages())

    assert isinstance(result, Fallback)
    assert result.reason == "deadline_exceeded"


@pytest.mark.asyncio
async def test_unexpected_dispatch_error_still_falls_back() -> None:
    def broken(_: httpx.Request) -> httpx.Response:
        raise RuntimeError("transport bug")

    pipeline = make_pipeline(broken)

    result = await travel_assistant.travel_chat(pipeline, _messages())

    assert isinstance(result, Fallback)
    assert result.reason == "unexpected_error"


@pytest.mark.asyncio
async def test_concurrent_runs_are_independent() -> None:
    def reply(request: httpx.Request) -> httpx.Response:
        body = request.read().decode()
        city = "Lima" if "Lima" in body else "Quito"
        return completion_response(f"Enjoy {city}!")

    pipeline = make_pipeline(reply)

    lima, quito = await asyncio.gather(
        travel_assistant.travel_chat(
            pipeline, [ChatMessageIn(role="user", content="Lima tips?")]
        ),
        travel_assistant.travel_chat(
            pipeline, [ChatMessageIn(role="user", content="Quito tips?")]
        ),
    )

    assert lima.value.response == "Enjoy Lima!"
    assert quito.value.response == "Enjoy Quito!"


@pytest.mark.asyncio
async def test_build_pipeline_from_settings() -> None:
    settings = Settings(
        OPENAI_API_KEY=None,
        OPENAI_BASE_URL="https://llm.example/v1/",
        AI_MAX_RETRIES=1,
        AI_REQUEST_DEADLINE_SECONDS=5,
    )
    async with httpx.AsyncClient() as client:
        pipeline = build_pipeline(settings, client)

        assert pipeline.deadline_seconds == 5
        assert not pipeline.dispatcher.configured

        result = await travel_assistant.travel_chat(pipeline, _messages())

    assert isinstance(result, Fallback)
    assert result.reason == "not_configured"
