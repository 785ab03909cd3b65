"""Dispatcher + resolver, run under an overall deadline.

``AIPipeline.run`` is the one entry point feature services use. It always
returns a ``Parsed`` or ``Fallback`` result; provider trouble, a blown
deadline or an unexpected error inside dispatch all end in the feature's
fallback payload.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TypeVar

import httpx
from pydantic import BaseModel

from core.config import Settings
from core.error_handler import StructuredLogger
from core.observability import get_tracer
from services.ai.dispatcher import RequestDispatcher
from services.ai.exceptions import DeadlineExceededError
from services.ai.extraction import PayloadExtractor
from services.ai.models import AIRequest, DispatchOutcome, Exhausted, Fallback, Parsed
from services.ai.provider import chat_completions_url
from services.ai.resolver import ResponseResolver


logger = StructuredLogger(__name__)
tracer = get_tracer(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class AIPipeline:
    def __init__(
        self,
        dispatcher: RequestDispatcher,
        resolver: ResponseResolver | None = None,
        deadline_seconds: float | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.resolver = resolver or ResponseResolver()
        self.deadline_seconds = deadline_seconds

    async def run(
        self,
        request: AIRequest,
        shape: type[ModelT],
        fallback_builder: Callable[[], ModelT],
        extractor: PayloadExtractor | None = None,
        deadline: float | None = None,
    ) -> Parsed[ModelT] | Fallback[ModelT]:
        """Dispatch ``request`` and resolve the reply into ``shape``."""
        with tracer.start_as_current_span("ai.pipeline.run") as span:
            span.set_attribute("ai.shape", request.shape)
            span.set_attribute("ai.max_tokens", request.max_tokens)

            outcome = await self._dispatch(request, deadline)
            result = self.resolver.resolve(outcome, shape, fallback_builder, extractor)

            span.set_attribute("ai.attempts", outcome.attempts)
            span.set_attribute("ai.provenance", result.provenance)
            if isinstance(result, Fallback):
                span.set_attribute("ai.fallback_reason", result.reason)
            return result

    async def _dispatch(
        self, request: AIRequest, deadline: float | None
    ) -> DispatchOutcome:
        limit = deadline if deadline is not None else self.deadline_seconds
        try:
            async with asyncio.timeout(limit):
                return await self.dispatcher.dispatch(request)
        except TimeoutError:
            logger.warning(
                "AI request deadline exceeded",
                shape=request.shape,
                deadline_seconds=limit,
            )
            return Exhausted(last_error=DeadlineExceededError())
        except Exception as exc:  # noqa: BLE001 - an AI feature must still answer
            logger.exception(
                "Unexpected error while dispatching AI request",
                shape=request.shape,
                error_type=type(exc).__name__,
            )
            return Exhausted(last_error=exc)


def build_pipeline(settings: Settings, client: httpx.AsyncClient) -> AIPipeline:
    """Assemble the pipeline from application settings."""
    dispatcher = RequestDispatcher(
        client,
        endpoint=chat_completions_url(settings.OPENAI_BASE_URL),
        api_key=settings.OPENAI_API_KEY,
        default_model=settings.OPENAI_MODEL,
        max_attempts=settings.AI_MAX_RETRIES,
        backoff_base=settings.AI_BACKOFF_BASE_SECONDS,
    )
    return AIPipeline(
        dispatcher,
        ResponseResolver(),
        deadline_seconds=settings.AI_REQUEST_DEADLINE_SECONDS,
    )
