"""Tool registry — the immutable, process-wide catalog of invocable tools.

Build it once at startup with :class:`ToolRegistryBuilder`; the resulting
:class:`ToolRegistry` is never mutated and can be shared by any number of
concurrent requests without locking.

Usage::

    registry = (
        ToolRegistryBuilder()
        .register(HelloTool())
        .register(OutlookMailTool())
        .build()
    )

    registry.lookup("hello")            # ToolDescriptor
    registry.invoke("hello", [])        # "hello world"
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from restify.protocol.errors import DuplicateToolError, ProtocolError, ToolInvocationError, ToolNotFoundError
from restify.utils.telemetry import ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from restify.tools.models import ToolDescriptor, ToolOperation
    from restify.tools.provider import ToolProvider

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class ToolRegistryBuilder:
    """Collects tool operations and freezes them into a :class:`ToolRegistry`."""

    def __init__(self) -> None:
        self._operations: dict[str, ToolOperation] = {}

    def register(self, provider: ToolProvider) -> ToolRegistryBuilder:
        """Add every operation *provider* exposes.

        Raises:
            DuplicateToolError: An operation name is already taken.
        """
        for operation in provider.operations():
            self.add(operation)
        return self

    def add(self, operation: ToolOperation) -> ToolRegistryBuilder:
        if operation.name in self._operations:
            raise DuplicateToolError(operation.name)
        self._operations[operation.name] = operation
        logger.debug("Registered tool: %s - %s", operation.name, operation.descriptor.description)
        return self

    def build(self) -> ToolRegistry:
        registry = ToolRegistry(self._operations)
        logger.info("Registered %d MCP tools", len(registry))
        return registry


class ToolRegistry:
    """Read-only mapping of tool name to descriptor and invocation binding.

    Iteration and :meth:`list_tools` follow registration order.
    """

    def __init__(self, operations: Mapping[str, ToolOperation]) -> None:
        self._operations: Mapping[str, ToolOperation] = MappingProxyType(dict(operations))

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def get(self, name: str) -> ToolDescriptor | None:
        operation = self._operations.get(name)
        return operation.descriptor if operation is not None else None

    def lookup(self, name: str) -> ToolDescriptor:
        """Return the descriptor registered under exactly *name*.

        Raises:
            ToolNotFoundError: No tool has that name.
        """
        descriptor = self.get(name)
        if descriptor is None:
            raise ToolNotFoundError(name)
        return descriptor

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return tuple(op.descriptor for op in self._operations.values())

    def invoke(self, name: str, arguments: Sequence[Any]) -> Any:
        """Call the tool *name* with already-bound positional *arguments*.

        Caller-input failures raised by the tool (any
        :class:`~restify.protocol.errors.ProtocolError`) propagate unchanged;
        everything else is wrapped in :class:`ToolInvocationError`.
        """
        operation = self._operations.get(name)
        if operation is None:
            raise ToolNotFoundError(name)

        with _tracer.start_as_current_span("mcp.tool.invoke") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            try:
                return operation.handler(*arguments)
            except ProtocolError:
                raise
            except Exception as exc:
                logger.exception("Error calling tool: %s", name)
                raise ToolInvocationError(name, exc) from exc
