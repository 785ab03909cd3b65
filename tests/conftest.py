"""Shared test fixtures for pytest.

Env defaults are set before any application import so the cached settings
see a test environment with no provider key: every AI call is ``Exhausted``
unless a test builds its own pipeline over a mock transport.
"""

import json
import os
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient


os.environ["ENVIRONMENT"] = "test"
os.environ.pop("OPENAI_API_KEY", None)
os.environ.setdefault("ENABLE_OBSERVABILITY", "false")

from dependencies.ai import get_ai_pipeline  # noqa: E402
from dependencies.db import get_db  # noqa: E402
from main import app  # noqa: E402
from services.ai.dispatcher import RequestDispatcher  # noqa: E402
from services.ai.pipeline import AIPipeline  # noqa: E402
from services.ai.resolver import ResponseResolver  # noqa: E402


TEST_ENDPOINT = "https://llm.test/v1/chat/completions"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def completion_body(content: str) -> dict[str, Any]:
    """Minimal chat-completion response envelope."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def completion_response(content: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=completion_body(content))


def json_completion(payload: dict[str, Any]) -> httpx.Response:
    return completion_response(json.dumps(payload))


def make_dispatcher(
    handler: Handler,
    *,
    api_key: str | None = "test-provider-key",
    max_attempts: int = 3,
    backoff_base: float = 1.0,
    sleep: Any = None,
) -> RequestDispatcher:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    kwargs: dict[str, Any] = {}
    if sleep is not None:
        kwargs["sleep"] = sleep
    return RequestDispatcher(
        client,
        endpoint=TEST_ENDPOINT,
        api_key=api_key,
        default_model="gpt-4o-mini",
        max_attempts=max_attempts,
        backoff_base=backoff_base,
        **kwargs,
    )


def make_pipeline(
    handler: Handler,
    *,
    api_key: str | None = "test-provider-key",
    deadline_seconds: float | None = None,
    sleep: Any = None,
    backoff_base: float = 1.0,
) -> AIPipeline:
    dispatcher = make_dispatcher(
        handler,
        api_key=api_key,
        sleep=sleep or RecordingSleep(),
        backoff_base=backoff_base,
    )
    return AIPipeline(dispatcher, ResponseResolver(), deadline_seconds=deadline_seconds)


def _unreachable(request: httpx.Request) -> httpx.Response:  # pragma: no cover
    raise AssertionError(f"unexpected provider call to {request.url}")


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def unconfigured_pipeline() -> AIPipeline:
    """Pipeline with no provider key; must never touch the network."""
    return make_pipeline(_unreachable, api_key=None)


class _FakeResult:
    """Lightweight stand-in for a SQLAlchemy result."""

    def __init__(self, rows: list[Any] | None = None) -> None:
        self._rows = rows or []

    def scalars(self):
        return self

    def all(self):
        return list(self._rows)


class FakeSession:
    """Minimal fake async session recording executed statements."""

    def __init__(
        self, rows: list[Any] | None = None, error: BaseException | None = None
    ) -> None:
        self.rows = rows or []
        self.error = error
        self.statements: list[Any] = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        if self.error is not None:
            raise self.error
        return _FakeResult(self.rows)

    async def close(self):  # pragma: no cover - no-op
        return None


@pytest.fixture
def override_pipeline() -> Generator[Callable[[AIPipeline], None], None, None]:
    """Install a pipeline for the duration of one test."""

    def _install(pipeline: AIPipeline) -> None:
        app.dependency_overrides[get_ai_pipeline] = lambda: pipeline

    yield _install
    app.dependency_overrides.pop(get_ai_pipeline, None)


@pytest.fixture
def override_db() -> Generator[Callable[[FakeSession], None], None, None]:
    def _install(session: FakeSession) -> None:
        async def _get_db() -> AsyncGenerator[FakeSession, None]:
            yield session

        app.dependency_overrides[get_db] = _get_db

    yield _install
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def client(unconfigured_pipeline: AIPipeline) -> Generator[TestClient, None, None]:
    """Test client whose AI features run without a provider key by default."""
    app.dependency_overrides[get_ai_pipeline] = lambda: unconfigured_pipeline
    yield TestClient(app)
    app.dependency_overrides.pop(get_ai_pipeline, None)


@pytest_asyncio.fixture
async def async_client(
    unconfigured_pipeline: AIPipeline,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    app.dependency_overrides[get_ai_pipeline] = lambda: unconfigured_pipeline
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as ac:
        yield ac
    app.dependency_overrides.pop(get_ai_pipeline, None)
