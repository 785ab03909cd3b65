"""Failure taxonomy for the AI request pipeline.

These exceptions are carried as values (``Exhausted.last_error`` and the
``Fallback.reason`` code) rather than raised past the resolver. Each one has a
stable ``error_code`` used as the fallback reason and as a log/trace tag.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class AIPipelineError(Exception):
    """Base class for AI pipeline errors."""

    message: str
    error_code: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.error_code}: {self.message}"


# --- Transport ---------------------------------------------------------------


class ProviderNotConfiguredError(AIPipelineError):
    def __init__(self, message: str = "AI provider API key is not configured") -> None:
        super().__init__(message=message, error_code="not_configured")


class RetriesExhaustedError(AIPipelineError):
    """Synthetic error for exhaustion caused by repeated retryable statuses."""

    def __init__(
        self,
        message: str = "Provider kept returning retryable statuses",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, error_code="retries_exhausted")
        self.status_code = status_code


class DeadlineExceededError(AIPipelineError):
    def __init__(self, message: str = "AI request deadline exceeded") -> None:
        super().__init__(message=message, error_code="deadline_exceeded")


class ProviderStatusError(AIPipelineError):
    """Non-retryable, non-2xx provider response (e.g. 400, 401, 404)."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            message=f"Provider responded with status {status_code}",
            error_code="bad_status",
        )
        self.status_code = status_code


# --- Content shape -----------------------------------------------------------


class CompletionEnvelopeError(AIPipelineError):
    def __init__(self, message: str = "Provider response envelope unreadable") -> None:
        super().__init__(message=message, error_code="bad_envelope")


class PayloadNotFoundError(AIPipelineError):
    def __init__(self, message: str = "No structured payload in provider reply") -> None:
        super().__init__(message=message, error_code="no_payload")


class PayloadDecodeError(AIPipelineError):
    def __init__(self, message: str = "Structured payload is not valid JSON") -> None:
        super().__init__(message=message, error_code="decode_failed")


class PayloadValidationError(AIPipelineError):
    def __init__(
        self, message: str = "Structured payload is missing required fields"
    ) -> None:
        super().__init__(message=message, error_code="invalid_shape")
