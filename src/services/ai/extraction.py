"""Strategies for recovering a structured payload from a provider reply.

The provider is asked for JSON but answers in free text, often wrapping the
object in prose or a Markdown fence. Each strategy turns the reply text into a
``dict`` or raises one of the content-shape errors; the resolver treats every
such error the same way (fallback), so strategies can be swapped, e.g. for a
provider with a native structured-output mode, without touching the resolver.
"""

from __future__ import annotations

import json
from typing import Any, Protocol

from services.ai.exceptions import PayloadDecodeError, PayloadNotFoundError


class PayloadExtractor(Protocol):
    """Turn assistant reply text into a JSON object."""

    def extract(self, text: str) -> dict[str, Any]: ...


def find_balanced_object(text: str) -> str | None:
    """Return the first balanced top-level ``{...}`` substring of ``text``.

    Braces inside JSON string literals (including escaped quotes) do not
    count towards nesting. An opening brace that is never closed (a truncated
    reply, or a stray brace in the prose) is skipped in favour of the
    earliest one that is. Single pass over the text; returns None when
    nothing balances.
    """
    open_at: list[int] = []
    first: tuple[int, int] | None = None
    in_string = False
    escaped = False
    for idx, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            open_at.append(idx)
        elif char == "}" and open_at:
            start = open_at.pop()
            if not open_at:
                return text[start : idx + 1]
            if first is None or start < first[0]:
                first = (start, idx)
    if first is None:
        return None
    return text[first[0] : first[1] + 1]


def _decode_object(candidate: str) -> dict[str, Any]:
    try:
        value = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise PayloadDecodeError(f"Invalid JSON at position {exc.pos}") from exc
    except (RecursionError, ValueError) as exc:
        raise PayloadDecodeError("JSON payload could not be decoded") from exc
    if not isinstance(value, dict):
        raise PayloadDecodeError("Payload is JSON but not an object")
    return value


class StrictJsonExtractor:
    """The entire reply (surrounding whitespace aside) must be a JSON object."""

    def extract(self, text: str) -> dict[str, Any]:
        stripped = text.strip()
        if not stripped.startswith("{"):
            raise PayloadNotFoundError("Reply is not a bare JSON object")
        return _decode_object(stripped)


class EmbeddedJsonExtractor:
    """Decode the first balanced ``{...}`` found anywhere in the reply."""

    def extract(self, text: str) -> dict[str, Any]:
        candidate = find_balanced_object(text)
        if candidate is None:
            raise PayloadNotFoundError()
        return _decode_object(candidate)


class StrictThenLenientExtractor:
    """Try a bare JSON reply first, then scan prose for an embedded object."""

    def __init__(self) -> None:
        self._strict = StrictJsonExtractor()
        self._lenient = EmbeddedJsonExtractor()

    def extract(self, text: str) -> dict[str, Any]:
        try:
            return self._strict.extract(text)
        except (PayloadNotFoundError, PayloadDecodeError):
            return self._lenient.extract(text)


class PlainTextExtractor:
    """Wrap a free-text reply under ``field`` (chat features)."""

    def __init__(self, field: str = "response") -> None:
        self._field = field

    def extract(self, text: str) -> dict[str, Any]:
        if not text or not text.strip():
            raise PayloadNotFoundError("Reply text is empty")
        return {self._field: text.strip()}
