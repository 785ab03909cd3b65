"""Schemas for the conversational travel assistants."""

from typing import Literal

from pydantic import Field

from .common import CamelModel


class ChatMessageIn(CamelModel):
    """One turn of the conversation as sent by the client.

    The client may attach a display timestamp; it is accepted and ignored.
    """

    role: Literal["user", "assistant"]
    content: str = Field(..., min_length=1, max_length=8000)


class ChatRequest(CamelModel):
    messages: list[ChatMessageIn] = Field(..., min_length=1, max_length=50)


class ChatReply(CamelModel):
    """Assistant reply; the only required key is the reply text."""

    response: str = Field(..., min_length=1)
