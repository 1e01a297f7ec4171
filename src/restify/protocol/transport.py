"""Transport negotiation and wire rendering of a finished response.

Two renderings exist and both carry the identical JSON document:

* **plain**: one JSON body with a Content-Length.
* **chunked**: the same document declared with chunked transfer framing
  and written as a single chunk. This is selected when the ``Accept``
  header mentions ``text/event-stream``; no incremental events are sent.

Chunked rendering degrades in three steps if serialization fails:
structured serialize, then a hand-built error document, then a fixed one.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from restify.protocol.models import INTERNAL_ERROR, JsonRpcResponse

if TYPE_CHECKING:
    from restify.protocol.models import RequestId

logger = logging.getLogger(__name__)

EVENT_STREAM = "text/event-stream"
JSON_MEDIA_TYPE = "application/json"

FALLBACK_DOCUMENT = (
    b'{"jsonrpc":"2.0","id":null,"error":{"code":-32603,'
    b'"message":"Internal error","data":"Stream creation failed"}}'
)


class TransportMode(str, Enum):
    """Wire rendering chosen for a response."""

    PLAIN = "plain"
    CHUNKED = "chunked"


@dataclass(frozen=True)
class RenderedResponse:
    """Bytes ready to be written, plus the framing they must be sent with."""

    body: bytes
    mode: TransportMode
    media_type: str = JSON_MEDIA_TYPE
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def chunked(self) -> bool:
        return self.mode is TransportMode.CHUNKED

    def chunks(self) -> Iterator[bytes]:
        """Yield the body as one single chunk."""
        yield self.body


def negotiate(accept: str | None) -> TransportMode:
    """Pick the rendering for an ``Accept`` header value (absent means JSON)."""
    if accept and EVENT_STREAM in accept.lower():
        return TransportMode.CHUNKED
    return TransportMode.PLAIN


def render(response: JsonRpcResponse, mode: TransportMode) -> RenderedResponse:
    if mode is TransportMode.CHUNKED:
        return render_chunked(response)
    return render_plain(response)


def render_plain(response: JsonRpcResponse) -> RenderedResponse:
    try:
        body = serialize(response)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.exception("Error serializing MCP response")
        body = serialize(
            JsonRpcResponse.failure(response.id, INTERNAL_ERROR, "Internal error", str(exc))
        )
    return RenderedResponse(body=body, mode=TransportMode.PLAIN)


def render_chunked(response: JsonRpcResponse) -> RenderedResponse:
    logger.info("Creating streamable response for id=%s", response.id)
    try:
        body = serialize(response)
    except Exception as exc:
        logger.exception("Error creating streamable response")
        try:
            body = hand_built_error(response.id, f"Error creating stream: {exc}")
        except Exception:
            logger.exception("Error creating streamable error response")
            body = FALLBACK_DOCUMENT
    return RenderedResponse(
        body=body,
        mode=TransportMode.CHUNKED,
        headers={"Transfer-Encoding": "chunked"},
    )


def serialize(response: JsonRpcResponse) -> bytes:
    """Encode *response* as compact UTF-8 JSON."""
    return json.dumps(
        response.to_wire(), ensure_ascii=False, separators=(",", ":"), allow_nan=False
    ).encode("utf-8")


def hand_built_error(request_id: RequestId, data: str) -> bytes:
    """Build an internal-error document without going through the response model."""
    return (
        '{"jsonrpc":"2.0","id":'
        + _id_literal(request_id)
        + ',"error":{"code":'
        + str(INTERNAL_ERROR)
        + ',"message":"Internal error","data":'
        + _string_literal(data)
        + "}}"
    ).encode("utf-8")


def _id_literal(request_id: Any) -> str:
    if isinstance(request_id, str):
        return _string_literal(request_id)
    if isinstance(request_id, int) and not isinstance(request_id, bool):
        return str(request_id)
    return "null"


def _string_literal(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    # Remaining control characters are not legal inside a JSON string.
    escaped = "".join(c if ord(c) >= 0x20 else f"\\u{ord(c):04x}" for c in escaped)
    return f'"{escaped}"'
