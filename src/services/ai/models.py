"""Contract objects flowing through the AI request pipeline.

* AIRequest        - immutable description of one provider call.
* DispatchOutcome  - ``Delivered | Exhausted``, produced by the dispatcher and
  consumed once by the resolver.
* StructuredResult - ``Parsed | Fallback``, the caller-visible result. Both
  variants carry a complete value; the variant only records provenance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar


Role = Literal["system", "user", "assistant"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ChatTurn:
    role: Role
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True, slots=True)
class AIRequest:
    """One logical request to the chat-completion provider.

    ``shape`` names the feature (and thereby the fallback payload) the request
    belongs to; it is used for logging and tracing only.
    """

    messages: tuple[ChatTurn, ...]
    shape: str
    temperature: float = 0.7
    max_tokens: int = 1000
    model: str | None = None

    def to_payload(self, default_model: str) -> dict[str, object]:
        """Chat-completion request body."""
        return {
            "model": self.model or default_model,
            "messages": [turn.as_dict() for turn in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


@dataclass(frozen=True, slots=True)
class Delivered:
    """The provider answered with a non-retryable status (success or not)."""

    status_code: int
    raw_text: str
    attempts: int = 1

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True, slots=True)
class Exhausted:
    """Every attempt failed with a retryable condition, or none was possible."""

    last_error: Exception
    attempts: int = 0


DispatchOutcome = Delivered | Exhausted


@dataclass(frozen=True, slots=True)
class Parsed(Generic[T]):  # noqa: UP046 (dataclass generics stay on typing.Generic)
    value: T

    @property
    def provenance(self) -> Literal["parsed"]:
        return "parsed"


@dataclass(frozen=True, slots=True)
class Fallback(Generic[T]):  # noqa: UP046
    value: T
    reason: str = field(default="unknown")

    @property
    def provenance(self) -> Literal["fallback"]:
        return "fallback"


StructuredResult = Parsed[T] | Fallback[T]
