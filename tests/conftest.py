"""Shared fixtures: a registry exercising every parameter type."""

from __future__ import annotations

from typing import Any

import pytest

from restify.protocol.dispatcher import MethodDispatcher
from restify.protocol.envelope import EnvelopeHandler
from restify.protocol.errors import ToolInputError
from restify.tools.models import ParameterDescriptor, SemanticType, ToolDescriptor, ToolOperation
from restify.tools.registry import ToolRegistry, ToolRegistryBuilder


def _param(name: str, semantic_type: SemanticType, description: str | None = None) -> ParameterDescriptor:
    return ParameterDescriptor(name=name, semantic_type=semantic_type, description=description)


class SampleTool:
    """Test provider with one operation per interesting behaviour."""

    def operations(self) -> list[ToolOperation]:
        return [
            ToolOperation(
                descriptor=ToolDescriptor(name="hello", description="Says hello."),
                handler=lambda: "hello world",
            ),
            ToolOperation(
                descriptor=ToolDescriptor(
                    name="add",
                    description="Adds two numbers.",
                    parameters=(
                        _param("a", SemanticType.INTEGER, "First addend"),
                        _param("b", SemanticType.NUMBER),
                    ),
                ),
                handler=lambda a, b: {"sum": a + b},
            ),
            ToolOperation(
                descriptor=ToolDescriptor(
                    name="describe",
                    description="Echoes its bound arguments.",
                    parameters=(
                        _param("label", SemanticType.STRING),
                        _param("verbose", SemanticType.BOOLEAN),
                        _param("options", SemanticType.OBJECT),
                        _param("tags", SemanticType.ARRAY),
                    ),
                ),
                handler=self.describe,
            ),
            ToolOperation(
                descriptor=ToolDescriptor(name="explode", description="Always fails."),
                handler=self.explode,
            ),
            ToolOperation(
                descriptor=ToolDescriptor(
                    name="reject",
                    description="Rejects its input.",
                    parameters=(_param("value", SemanticType.STRING),),
                ),
                handler=self.reject,
            ),
        ]

    def describe(
        self,
        label: str | None,
        verbose: bool,
        options: dict[str, Any] | None,
        tags: list[Any] | None,
    ) -> dict[str, Any]:
        return {"label": label, "verbose": verbose, "options": options, "tags": tags}

    def explode(self) -> str:
        raise RuntimeError("backend unavailable")

    def reject(self, value: str | None) -> str:
        raise ToolInputError(f"cannot use {value!r}")


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistryBuilder().register(SampleTool()).build()


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> MethodDispatcher:
    return MethodDispatcher(registry, server_name="test-server", server_version="9.9.9")


@pytest.fixture
def handler(dispatcher: MethodDispatcher) -> EnvelopeHandler:
    return EnvelopeHandler(dispatcher)
