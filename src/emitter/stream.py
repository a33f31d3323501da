"""Streaming JSON array emitter."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, BinaryIO

from src.errors import DecodeError

_SENTINEL = object()


def _encode(message: Any) -> bytes:
    try:
        text = json.dumps(
            message, separators=(",", ":"), ensure_ascii=False, allow_nan=False,
        )
    except ValueError as exc:
        raise DecodeError(f"Message is not representable as strict JSON: {exc}") from exc
    return text.encode("utf-8")


def emit_json_array(messages: Iterable[Any], sink: BinaryIO) -> int:
    """Write messages to sink as a single JSON array without materializing it.

    The opening bracket is written before the first message is pulled. A
    separator follows a message only if the lookahead produced another one,
    so chunk boundaries in the source are invisible here. On failure the
    partial array is left on the sink.

    Returns the number of messages written.
    """
    iterator = iter(messages)
    count = 0

    sink.write(b"[")
    pending = next(iterator, _SENTINEL)
    while pending is not _SENTINEL:
        sink.write(_encode(pending))
        count += 1
        pending = next(iterator, _SENTINEL)
        if pending is not _SENTINEL:
            sink.write(b",")
    sink.write(b"]")
    sink.flush()

    return count
