"""Envelope validation: turns a raw request body into a response object.

This is the outermost dispatch boundary: whatever the body contains, the
caller gets back a well-formed :class:`JsonRpcResponse`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from restify.protocol.dispatcher import error_response
from restify.protocol.errors import InvalidRequestError, ProtocolError
from restify.protocol.models import INTERNAL_ERROR, JSONRPC_VERSION, JsonRpcRequest, JsonRpcResponse
from restify.utils.telemetry import ATTR_ERROR_CODE, ATTR_METHOD, ATTR_REQUEST_ID, get_tracer

if TYPE_CHECKING:
    from restify.protocol.dispatcher import MethodDispatcher
    from restify.protocol.models import RequestId

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class EnvelopeHandler:
    """Validates JSON-RPC envelopes and hands them to a :class:`MethodDispatcher`."""

    def __init__(self, dispatcher: MethodDispatcher) -> None:
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> MethodDispatcher:
        return self._dispatcher

    def handle(self, body: bytes | str | Mapping[str, Any]) -> JsonRpcResponse:
        """Validate *body*, dispatch it and return the response. Never raises.

        *body* is either the raw request bytes/text or an already-decoded
        JSON object.
        """
        request_id: RequestId = None
        with _tracer.start_as_current_span("mcp.request") as span:
            try:
                payload = decode_body(body)
                request_id = request_id_of(payload)
                request = validate_envelope(payload, request_id)
                span.set_attribute(ATTR_METHOD, request.method)
                if request.id is not None:
                    span.set_attribute(ATTR_REQUEST_ID, str(request.id))
                response = self._dispatcher.dispatch(request)
            except ProtocolError as exc:
                logger.warning("Invalid MCP request (id=%s): %s", request_id, exc.detail)
                response = error_response(request_id, exc)
            except Exception as exc:
                logger.exception("Error processing MCP request")
                response = JsonRpcResponse.failure(request_id, INTERNAL_ERROR, "Internal error", str(exc))

            if response.error is not None:
                span.set_attribute(ATTR_ERROR_CODE, response.error.code)
        return response


def decode_body(body: bytes | str | Mapping[str, Any]) -> dict[str, Any]:
    """Return the request object held in *body*.

    Raises:
        InvalidRequestError: The body is not a JSON object.
    """
    if isinstance(body, Mapping):
        return dict(body)
    try:
        text = body.decode("utf-8") if isinstance(body, bytes) else body
        payload = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidRequestError(f"Request body is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request must be a JSON object")
    return payload


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not a valid JSON value"
    raise ValueError(msg)


def request_id_of(payload: Mapping[str, Any]) -> RequestId:
    """Return the request ``id`` if it is a string, integer or null, else ``None``."""
    request_id = payload.get("id")
    if is_valid_id(request_id):
        return request_id
    return None


def is_valid_id(value: Any) -> bool:
    if value is None or isinstance(value, str):
        return True
    return isinstance(value, int) and not isinstance(value, bool)


def validate_envelope(payload: Mapping[str, Any], request_id: RequestId) -> JsonRpcRequest:
    """Check the envelope members and build the typed request.

    The ``jsonrpc`` version is checked first so that a wrong version is
    reported even when other members are malformed too.

    Raises:
        InvalidRequestError: Any member is missing or of the wrong shape.
    """
    if payload.get("jsonrpc") != JSONRPC_VERSION:
        raise InvalidRequestError(f"jsonrpc must be '{JSONRPC_VERSION}'")
    if not is_valid_id(payload.get("id")):
        raise InvalidRequestError("'id' must be a string, an integer or null")

    method = payload.get("method")
    if not isinstance(method, str):
        raise InvalidRequestError("'method' must be a string")

    params = payload.get("params")
    if params is not None and not isinstance(params, (dict, list)):
        raise InvalidRequestError("'params' must be an object or an array")

    try:
        return JsonRpcRequest(jsonrpc=JSONRPC_VERSION, method=method, id=request_id, params=params)
    except ValidationError as exc:
        raise InvalidRequestError(str(exc)) from exc
