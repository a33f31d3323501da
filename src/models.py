"""Wire models for conversations.history and the chunks derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field

from src.errors import ApiError, ProtocolError

# --- Wire Models ---


class ResponseMetadata(BaseModel):
    next_cursor: str | None = None


class HistoryResponse(BaseModel):
    """Decoded reply of one conversations.history call.

    Messages are opaque JSON values and are passed through untouched.
    """

    ok: bool
    messages: list[Any] = Field(default_factory=list)
    has_more: bool = False
    response_metadata: ResponseMetadata | None = None
    error: str | None = None


# --- Chunk Models ---


@dataclass(frozen=True)
class TerminalChunk:
    """Last page: no further requests are needed."""

    messages: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class NonTerminalChunk:
    """A page followed by at least one more, reachable through next_cursor."""

    messages: list[Any]
    next_cursor: str


MessageChunk = TerminalChunk | NonTerminalChunk


def chunk_from_response(response: HistoryResponse) -> MessageChunk:
    """Validate a decoded response and narrow it to a chunk variant."""
    if not response.ok:
        raise ApiError(response.error or "Unknown")

    if response.has_more:
        metadata = response.response_metadata
        # an empty cursor restarts from the first page
        if metadata is None or not metadata.next_cursor:
            raise ProtocolError()
        return NonTerminalChunk(
            messages=response.messages,
            next_cursor=metadata.next_cursor,
        )

    return TerminalChunk(messages=response.messages)
