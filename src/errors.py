"""Exception hierarchy for the history export."""

from __future__ import annotations


class HistoryExportError(Exception):
    """Base exception for every failure that aborts an export."""


class ConfigurationError(HistoryExportError):
    """Required configuration values are absent."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            f"Missing required environment variables: {', '.join(missing)}",
        )


class TransportError(HistoryExportError):
    """The HTTP layer failed (connection, timeout, protocol)."""


class DecodeError(HistoryExportError):
    """A response body is not JSON or lacks the expected shape."""


class ApiError(HistoryExportError):
    """The remote API answered with ``ok: false``."""

    def __init__(self, error: str = "Unknown") -> None:
        self.error = error
        super().__init__(f"Error fetching data from the Slack API: {error}")


class ProtocolError(HistoryExportError):
    """The API announced more pages without a continuation cursor."""

    def __init__(self) -> None:
        super().__init__(
            "Error fetching additional data: Slack API response missing cursor",
        )
