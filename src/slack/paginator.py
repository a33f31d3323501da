"""Cursor pagination over the Slack conversations.history endpoint.

One request is in flight at a time. The next page is requested only once
every message of the current chunk has been handed out.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import httpx
from pydantic import ValidationError

from src.config import Configuration
from src.errors import DecodeError, TransportError
from src.models import (
    HistoryResponse,
    MessageChunk,
    NonTerminalChunk,
    chunk_from_response,
)

logger = logging.getLogger(__name__)

CONVERSATION_HISTORY_ENDPOINT = "https://slack.com/api/conversations.history"
RESPONSE_MESSAGE_LIMIT = 1000


class SlackPaginator:
    """Top-level conversations.history client for a single channel."""

    def __init__(
        self,
        configuration: Configuration,
        client: httpx.Client | None = None,
        endpoint: str = CONVERSATION_HISTORY_ENDPOINT,
        limit: int = RESPONSE_MESSAGE_LIMIT,
    ) -> None:
        self._api_token = configuration.api_token
        self._channel = configuration.channel
        self._endpoint = endpoint
        self._limit = limit
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client()
        self._pages_fetched = 0
        self._started = False

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def fetch_chunk(self, cursor: str | None = None) -> MessageChunk:
        """Fetch and validate a single page of the conversation history."""
        params: dict[str, Any] = {"channel": self._channel, "limit": self._limit}
        if cursor is not None:
            params["cursor"] = cursor
        headers = {"Authorization": f"Bearer {self._api_token}"}

        page = self._pages_fetched + 1
        logger.debug(
            "Requesting history page %d for channel %s (cursor=%s)",
            page, self._channel, "yes" if cursor is not None else "no",
        )
        try:
            resp = self._client.get(self._endpoint, params=params, headers=headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {self._endpoint} failed: {exc}") from exc
        self._pages_fetched = page

        try:
            response = HistoryResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(
                f"Unexpected response body from {self._endpoint} "
                f"(HTTP {resp.status_code}): {exc}",
            ) from exc

        chunk = chunk_from_response(response)
        logger.debug(
            "Page %d: %d messages, %s",
            page, len(chunk.messages),
            "more pages follow" if isinstance(chunk, NonTerminalChunk) else "last page",
        )
        return chunk

    def messages(self) -> Iterator[Any]:
        """Lazily yield every message of the channel in request order.

        Single-pass: the cursor state is consumed as the iterator advances.
        """
        if self._started:
            raise RuntimeError("Message history can only be iterated once per paginator")
        self._started = True
        return self._iter_messages()

    def _iter_messages(self) -> Iterator[Any]:
        chunk = self.fetch_chunk(None)
        while True:
            yield from chunk.messages
            if not isinstance(chunk, NonTerminalChunk):
                return
            chunk = self.fetch_chunk(chunk.next_cursor)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> SlackPaginator:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
