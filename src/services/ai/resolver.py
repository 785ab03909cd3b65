"""Response resolver: every dispatch outcome becomes a complete result.

Per call::

    Exhausted ------------------------------------------------> Fallback
    Delivered -> status ok? -> read envelope -> extract -> validate -> Parsed
                     \\______________\\______________\\___________\\--> Fallback

The resolver never retries and never raises for provider or content
problems; the reason for a fallback is logged and kept on the result.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from core.error_handler import StructuredLogger
from services.ai.exceptions import (
    AIPipelineError,
    PayloadValidationError,
    ProviderStatusError,
)
from services.ai.extraction import PayloadExtractor, StrictThenLenientExtractor
from services.ai.models import Delivered, DispatchOutcome, Exhausted, Fallback, Parsed
from services.ai.provider import ChatCompletionReader, CompletionReader


logger = StructuredLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def failure_reason(error: Exception) -> str:
    """Stable reason code for an exhaustion error."""
    if isinstance(error, AIPipelineError):
        return error.error_code
    if isinstance(error, httpx.TimeoutException):
        return "timeout"
    if isinstance(error, httpx.TransportError):
        return "transport_error"
    return "unexpected_error"


class ResponseResolver:
    """Shape-agnostic parser with deterministic fallback."""

    def __init__(
        self,
        reader: CompletionReader | None = None,
        extractor: PayloadExtractor | None = None,
    ) -> None:
        self._reader = reader or ChatCompletionReader()
        self._extractor = extractor or StrictThenLenientExtractor()

    def resolve(
        self,
        outcome: DispatchOutcome,
        shape: type[ModelT],
        fallback_builder: Callable[[], ModelT],
        extractor: PayloadExtractor | None = None,
    ) -> Parsed[ModelT] | Fallback[ModelT]:
        if isinstance(outcome, Exhausted):
            return self._fallback(
                shape, fallback_builder, failure_reason(outcome.last_error)
            )

        try:
            value = self._parse(outcome, shape, extractor or self._extractor)
        except AIPipelineError as exc:
            return self._fallback(shape, fallback_builder, exc.error_code, exc.message)
        except Exception as exc:  # noqa: BLE001 - an AI feature must still answer
            logger.exception(
                "Unexpected error while resolving AI reply",
                shape=shape.__name__,
                error_type=type(exc).__name__,
            )
            return self._fallback(shape, fallback_builder, "unexpected_error")

        return Parsed(value=value)

    def _parse(
        self,
        outcome: Delivered,
        shape: type[ModelT],
        extractor: PayloadExtractor,
    ) -> ModelT:
        if not outcome.ok:
            raise ProviderStatusError(outcome.status_code)

        text = self._reader.read(outcome.raw_text)
        payload = extractor.extract(text)
        try:
            return shape.model_validate(payload)
        except ValidationError as exc:
            missing = sorted(
                ".".join(str(part) for part in err["loc"])
                for err in exc.errors()
                if err["type"] == "missing"
            )
            raise PayloadValidationError(
                f"{exc.error_count()} validation error(s); missing: {missing[:5]}"
            ) from exc

    def _fallback(
        self,
        shape: type[ModelT],
        fallback_builder: Callable[[], ModelT],
        reason: str,
        detail: str | None = None,
    ) -> Fallback[ModelT]:
        logger.warning(
            "AI result unusable, serving fallback",
            shape=shape.__name__,
            reason=reason,
            detail=detail,
        )
        return Fallback(value=fallback_builder(), reason=reason)
