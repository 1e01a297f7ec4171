"""MethodDispatcher — routes a validated request to its protocol method.

Only three methods exist: ``initialize``, ``tools/list`` and ``tools/call``.
Every request ends in exactly one :class:`JsonRpcResponse`; protocol errors
raised along the way are folded into its ``error`` member here, and anything
unexpected becomes ``-32603``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from restify import __version__
from restify.protocol.errors import InvalidParamsError, MethodNotFoundError, ProtocolError
from restify.protocol.models import INTERNAL_ERROR, JsonRpcRequest, JsonRpcResponse
from restify.tools.binder import bind_arguments
from restify.tools.formatter import format_result

if TYPE_CHECKING:
    from collections.abc import Callable

    from restify.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

DEFAULT_PROTOCOL_VERSION = "2024-11-05"
DEFAULT_SERVER_NAME = "mcp-restify"


class MethodDispatcher:
    """Maps JSON-RPC methods onto the tool registry.

    Usage::

        dispatcher = MethodDispatcher(build_default_registry())
        response = dispatcher.dispatch(JsonRpcRequest(method="tools/list", id=1))
    """

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        server_name: str = DEFAULT_SERVER_NAME,
        server_version: str = __version__,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
    ) -> None:
        self._registry = registry
        self._server_name = server_name
        self._server_version = server_version
        self._protocol_version = protocol_version
        self._methods: dict[str, Callable[[Any], Any]] = {
            "initialize": self.initialize,
            "tools/list": self.list_tools,
            "tools/call": self.call_tool,
        }

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def methods(self) -> tuple[str, ...]:
        return tuple(self._methods)

    def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Run *request* and return its response; never raises."""
        logger.debug("Dispatching method=%s id=%s", request.method, request.id)
        try:
            handler = self._methods.get(request.method)
            if handler is None:
                raise MethodNotFoundError(request.method)
            return JsonRpcResponse.success(request.id, handler(request.params))
        except ProtocolError as exc:
            if exc.code == INTERNAL_ERROR:
                logger.error("Internal error handling %s: %s", request.method, exc.detail)
            else:
                logger.warning("Rejected %s request id=%s: %s", request.method, request.id, exc.detail)
            return error_response(request.id, exc)
        except Exception as exc:
            logger.exception("Error processing MCP request %s", request.method)
            return JsonRpcResponse.failure(request.id, INTERNAL_ERROR, "Internal error", str(exc))

    # -- protocol methods ---------------------------------------------------

    def initialize(self, params: Any = None) -> dict[str, Any]:
        """Return the fixed capability descriptor; *params* is ignored."""
        return {
            "protocolVersion": self._protocol_version,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": self._server_name, "version": self._server_version},
        }

    def list_tools(self, params: Any = None) -> dict[str, Any]:
        return {"tools": [d.to_schema() for d in self._registry.list_tools()]}

    def call_tool(self, params: Any) -> dict[str, Any]:
        """Look up, bind, invoke and format a single tool call.

        Raises:
            InvalidParamsError: ``name`` is missing or unknown, or the
                arguments do not satisfy the tool's parameters.
            ToolInvocationError: The tool body failed.
        """
        if not isinstance(params, dict) or "name" not in params:
            raise InvalidParamsError("Missing 'name' parameter in params")
        name = params["name"]
        if not isinstance(name, str):
            raise InvalidParamsError("'name' must be a string")

        arguments = params.get("arguments")
        descriptor = self._registry.lookup(name)
        bound = bind_arguments(descriptor, arguments)
        logger.debug("Calling tool: %s, with arguments: %s", name, arguments)

        return format_result(self._registry.invoke(name, bound))


def error_response(request_id: Any, exc: ProtocolError) -> JsonRpcResponse:
    """Build the error response corresponding to *exc*."""
    return JsonRpcResponse.failure(request_id, exc.code, exc.message, exc.detail or None)
