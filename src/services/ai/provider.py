"""OpenAI-compatible chat-completion provider details.

Keeps the wire specifics (endpoint path, response envelope) out of the
dispatcher and resolver, so another compatible provider only needs a
different base URL.
"""

from __future__ import annotations

import json
from typing import Protocol

import httpx

from services.ai.exceptions import CompletionEnvelopeError


CHAT_COMPLETIONS_PATH = "/chat/completions"


def chat_completions_url(base_url: str) -> str:
    return base_url.rstrip("/") + CHAT_COMPLETIONS_PATH


def build_http_client(timeout_seconds: float) -> httpx.AsyncClient:
    """Shared client for provider calls; per-call state lives in the request."""
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds, connect=10.0))


class CompletionReader(Protocol):
    """Pull the assistant's reply text out of a raw provider response body."""

    def read(self, raw_text: str) -> str: ...


class ChatCompletionReader:
    """Reads ``choices[0].message.content`` from a chat-completion body."""

    def read(self, raw_text: str) -> str:
        if not raw_text or not raw_text.strip():
            raise CompletionEnvelopeError("Provider response body is empty")
        try:
            body = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise CompletionEnvelopeError("Provider response is not JSON") from exc
        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise CompletionEnvelopeError(
                "Provider response has no choices[0].message.content"
            ) from exc
        if not isinstance(content, str):
            raise CompletionEnvelopeError("Provider message content is not text")
        return content
