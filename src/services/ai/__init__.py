"""Init file for AI services."""

from .models import AIRequest, ChatTurn, Delivered, Exhausted, Fallback, Parsed
from .pipeline import AIPipeline, build_pipeline


__all__ = [
    "AIPipeline",
    "AIRequest",
    "ChatTurn",
    "Delivered",
    "Exhausted",
    "Fallback",
    "Parsed",
    "build_pipeline",
]
