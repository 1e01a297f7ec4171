"""Protocol layer — JSON-RPC envelope, method dispatch and transport rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from restify.protocol.errors import (
    ArgumentCoercionError,
    DuplicateToolError,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    MissingParameterError,
    ProtocolError,
    ToolInputError,
    ToolInvocationError,
    ToolNotFoundError,
)
from restify.protocol.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse

if TYPE_CHECKING:
    from restify.protocol.dispatcher import MethodDispatcher as MethodDispatcher
    from restify.protocol.envelope import EnvelopeHandler as EnvelopeHandler
    from restify.protocol.transport import RenderedResponse as RenderedResponse
    from restify.protocol.transport import TransportMode as TransportMode

# The dispatcher depends on the tools package, which depends on the errors above.
_LAZY_EXPORTS = {
    "MethodDispatcher": "restify.protocol.dispatcher",
    "EnvelopeHandler": "restify.protocol.envelope",
    "RenderedResponse": "restify.protocol.transport",
    "TransportMode": "restify.protocol.transport",
}

__all__ = [
    "ArgumentCoercionError",
    "DuplicateToolError",
    "EnvelopeHandler",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodDispatcher",
    "MethodNotFoundError",
    "MissingParameterError",
    "ProtocolError",
    "RenderedResponse",
    "ToolInputError",
    "ToolInvocationError",
    "ToolNotFoundError",
    "TransportMode",
]


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'restify.protocol' has no attribute {name!r}")
