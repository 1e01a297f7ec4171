"""Tests for the tool registry and its builder."""

from typing import Any

import pytest

from restify.protocol.errors import (
    DuplicateToolError,
    InvalidParamsError,
    ToolInputError,
    ToolInvocationError,
    ToolNotFoundError,
)
from restify.tools.models import ToolDescriptor, ToolOperation
from restify.tools.provider import ToolProvider
from restify.tools.registry import ToolRegistry, ToolRegistryBuilder


def _op(name: str, handler: Any = None) -> ToolOperation:
    return ToolOperation(descriptor=ToolDescriptor(name=name), handler=handler or (lambda: name))


class _Provider:
    def __init__(self, *names: str) -> None:
        self._names = names

    def operations(self) -> list[ToolOperation]:
        return [_op(n) for n in self._names]


class TestToolProvider:
    def test_runtime_checkable(self) -> None:
        assert isinstance(_Provider("a"), ToolProvider)

    def test_non_provider_fails(self) -> None:
        assert not isinstance("not a provider", ToolProvider)


class TestToolRegistryBuilder:
    def test_register_collects_operations(self) -> None:
        registry = ToolRegistryBuilder().register(_Provider("a", "b")).build()
        assert len(registry) == 2
        assert "a" in registry
        assert "b" in registry

    def test_duplicate_across_providers_raises(self) -> None:
        builder = ToolRegistryBuilder().register(_Provider("a"))
        with pytest.raises(DuplicateToolError, match="a"):
            builder.register(_Provider("a"))

    def test_duplicate_within_provider_raises(self) -> None:
        with pytest.raises(DuplicateToolError):
            ToolRegistryBuilder().register(_Provider("x", "x"))

    def test_built_registry_is_detached_from_builder(self) -> None:
        builder = ToolRegistryBuilder().add(_op("first"))
        registry = builder.build()
        builder.add(_op("second"))
        assert "second" not in registry
        assert list(registry) == ["first"]


class TestToolRegistry:
    def test_lookup(self, registry: ToolRegistry) -> None:
        descriptor = registry.lookup("hello")
        assert descriptor.name == "hello"

    def test_lookup_unknown_raises(self, registry: ToolRegistry) -> None:
        with pytest.raises(ToolNotFoundError, match="nonexistent"):
            registry.lookup("nonexistent")

    def test_lookup_is_exact(self, registry: ToolRegistry) -> None:
        assert registry.get("HELLO") is None
        assert registry.get("hell") is None

    def test_not_found_is_invalid_params(self) -> None:
        assert issubclass(ToolNotFoundError, InvalidParamsError)

    def test_list_tools_in_registration_order(self, registry: ToolRegistry) -> None:
        names = [d.name for d in registry.list_tools()]
        assert names == ["hello", "add", "describe", "explode", "reject"]
        assert [d.name for d in registry.list_tools()] == names

    def test_invoke(self, registry: ToolRegistry) -> None:
        assert registry.invoke("hello", []) == "hello world"
        assert registry.invoke("add", [2, 0.5]) == {"sum": 2.5}

    def test_invoke_unknown_raises(self, registry: ToolRegistry) -> None:
        with pytest.raises(ToolNotFoundError):
            registry.invoke("missing", [])

    def test_invoke_wraps_tool_failure(self, registry: ToolRegistry) -> None:
        with pytest.raises(ToolInvocationError) as exc_info:
            registry.invoke("explode", [])
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert exc_info.value.detail == "Error executing tool: backend unavailable"

    def test_invoke_propagates_input_errors(self, registry: ToolRegistry) -> None:
        with pytest.raises(ToolInputError, match="cannot use"):
            registry.invoke("reject", ["bad"])

    def test_mapping_is_read_only(self, registry: ToolRegistry) -> None:
        with pytest.raises(TypeError):
            registry._operations["new"] = _op("new")  # type: ignore[index]
