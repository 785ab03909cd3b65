"""Request dispatcher: deliver one chat-completion call despite transient failures.

Retry policy
------------
* Up to ``max_attempts + 1`` tries. ``max_attempts`` counts *retries*, so the
  default of 3 means four tries in total.
* Retryable: HTTP 429, any 5xx, or an ``httpx.TransportError`` (connect/read
  timeouts, refused connections, protocol errors).
* Anything else, 2xx or another 4xx, is handed back as ``Delivered`` right
  away. Interpreting a non-2xx body is the resolver's job.
* Backoff doubles from ``backoff_base`` seconds: 1s, 2s, 4s, ... with no sleep
  after the final try.

The HTTP client and the sleep coroutine are injected so callers (and tests)
control transport and time. A dispatcher holds no per-call state; concurrent
``dispatch`` calls do not interact.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx
from opentelemetry import trace
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from core.error_handler import StructuredLogger
from services.ai.exceptions import ProviderNotConfiguredError, RetriesExhaustedError
from services.ai.models import AIRequest, Delivered, DispatchOutcome, Exhausted


logger = StructuredLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF_BASE_SECONDS = 1.0
MAX_BACKOFF_SECONDS = 60.0

SleepFn = Callable[[float], Awaitable[None]]


def is_retryable_status(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


def _is_retryable_response(response: httpx.Response) -> bool:
    return is_retryable_status(response.status_code)


def backoff_delay(retry_number: int, base: float = DEFAULT_BACKOFF_BASE_SECONDS) -> float:
    """Seconds to wait before retry ``retry_number`` (1-based): base * 2**(n-1)."""
    return min(base * 2 ** (retry_number - 1), MAX_BACKOFF_SECONDS)


@dataclass
class _AttemptTrail:
    """What the attempts of a single dispatch observed."""

    last_error: Exception | None = None
    last_status: int | None = None

    def record(self, retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome
        if outcome is None:  # pragma: no cover - tenacity always sets it here
            return
        if outcome.failed:
            exc = outcome.exception()
            if isinstance(exc, Exception):
                self.last_error = exc
        else:
            self.last_status = outcome.result().status_code


def _describe(retry_state: RetryCallState) -> str:
    outcome = retry_state.outcome
    if outcome is None:  # pragma: no cover
        return "unknown"
    if outcome.failed:
        return type(outcome.exception()).__name__
    status = outcome.result().status_code
    return "rate_limited" if status == 429 else f"server_error_{status}"


class RequestDispatcher:
    """POST an ``AIRequest`` to the chat-completion endpoint with retries."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        endpoint: str,
        api_key: str | None,
        default_model: str,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        backoff_base: float = DEFAULT_BACKOFF_BASE_SECONDS,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._api_key = api_key
        self._default_model = default_model
        self._max_attempts = max_attempts
        self._backoff_base = backoff_base
        self._sleep = sleep

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._api_key.strip())

    async def dispatch(
        self, request: AIRequest, max_attempts: int | None = None
    ) -> DispatchOutcome:
        """Deliver ``request``; never raises for provider unavailability.

        Cancellation (``asyncio.CancelledError``) is not caught: it aborts the
        in-flight call or pending backoff sleep and propagates to the caller.
        """
        if not self.configured:
            logger.warning("AI provider not configured", shape=request.shape)
            return Exhausted(last_error=ProviderNotConfiguredError(), attempts=0)

        retries = self._max_attempts if max_attempts is None else max_attempts
        trail = _AttemptTrail()

        def before_sleep(retry_state: RetryCallState) -> None:
            trail.record(retry_state)
            delay = retry_state.upcoming_sleep
            cause = _describe(retry_state)
            logger.warning(
                "AI provider call failed, retrying",
                shape=request.shape,
                attempt=retry_state.attempt_number,
                max_tries=retries + 1,
                delay_ms=int(delay * 1000),
                cause=cause,
            )
            trace.get_current_span().add_event(
                "ai.dispatch.retry",
                {
                    "ai.attempt": retry_state.attempt_number,
                    "ai.delay_ms": int(delay * 1000),
                    "ai.cause": cause,
                },
            )

        def on_exhausted(retry_state: RetryCallState) -> Exhausted:
            trail.record(retry_state)
            error = trail.last_error or RetriesExhaustedError(
                status_code=trail.last_status
            )
            logger.error(
                "AI provider retries exhausted",
                shape=request.shape,
                attempts=retry_state.attempt_number,
                last_status=trail.last_status,
                error_type=type(error).__name__,
            )
            return Exhausted(last_error=error, attempts=retry_state.attempt_number)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(retries + 1),
            wait=wait_exponential(
                multiplier=self._backoff_base, exp_base=2, max=MAX_BACKOFF_SECONDS
            ),
            retry=(
                retry_if_exception_type(httpx.TransportError)
                | retry_if_result(_is_retryable_response)
            ),
            sleep=self._sleep,
            before_sleep=before_sleep,
            retry_error_callback=on_exhausted,
        )

        attempts = 0

        async def send() -> httpx.Response:
            nonlocal attempts
            attempts += 1
            return await self._post(request)

        result = await retrying(send)
        if isinstance(result, Exhausted):
            return result

        logger.debug(
            "AI provider responded",
            shape=request.shape,
            status_code=result.status_code,
            attempts=attempts,
        )
        return Delivered(
            status_code=result.status_code, raw_text=result.text, attempts=attempts
        )

    async def _post(self, request: AIRequest) -> httpx.Response:
        return await self._client.post(
            self._endpoint,
            json=request.to_payload(self._default_model),
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
        )
