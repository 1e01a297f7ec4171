"""Exception hierarchy for the dispatch core.

Each :class:`ProtocolError` carries the JSON-RPC error code it maps to, so the
dispatcher can turn any of them into an ``error`` object without a lookup
table. ``message`` is the canonical JSON-RPC text; ``detail`` ends up in
``error.data``.
"""

from __future__ import annotations

from restify.protocol.models import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
)


class ProtocolError(Exception):
    """Base error for all failures reportable as a JSON-RPC error object."""

    code: int = INTERNAL_ERROR
    message: str = "Internal error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{self.message}" + (f": {detail}" if detail else ""))


class InvalidRequestError(ProtocolError):
    """The envelope itself is malformed."""

    code = INVALID_REQUEST
    message = "Invalid Request"


class MethodNotFoundError(ProtocolError):
    """The JSON-RPC method is not one the server supports."""

    code = METHOD_NOT_FOUND
    message = "Method not found"

    def __init__(self, method: object) -> None:
        self.method = method
        super().__init__(f"Method '{method}' is not supported")


class InvalidParamsError(ProtocolError):
    """The caller supplied bad or missing parameters."""

    code = INVALID_PARAMS
    message = "Invalid params"


class ToolNotFoundError(InvalidParamsError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' not found")


class MissingParameterError(InvalidParamsError):
    """A required tool parameter was absent or null."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"Required parameter '{parameter}' is missing")


class ArgumentCoercionError(InvalidParamsError):
    """An argument could not be converted to its declared type."""

    def __init__(self, parameter: str, expected: str, value: object) -> None:
        self.parameter = parameter
        self.expected = expected
        super().__init__(
            f"Parameter '{parameter}' expects {expected}, got {type(value).__name__}: {value!r}"
        )


class ToolInputError(InvalidParamsError):
    """Raised by a tool body when its caller-supplied input is unusable."""


class InternalError(ProtocolError):
    """Unexpected failure during dispatch."""


class ToolInvocationError(InternalError):
    """A tool body raised something other than a caller-input failure."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Error executing tool: {cause}")


class DuplicateToolError(Exception):
    """Two operations were registered under the same tool name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate tool name: {name}")
