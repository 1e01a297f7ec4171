"""Tool descriptors — the declared schema of every invocable tool.

Descriptors are frozen: they are built once while the registry is assembled
and shared read-only by every request afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SemanticType(str, Enum):
    """JSON-level type a tool parameter is declared with."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    @property
    def is_scalar_non_nullable(self) -> bool:
        return self in _NON_NULLABLE


_NON_NULLABLE = frozenset({SemanticType.INTEGER, SemanticType.NUMBER, SemanticType.BOOLEAN})


class ParameterDescriptor(BaseModel):
    """One declared parameter of a tool operation."""

    model_config = {"frozen": True}

    name: str
    semantic_type: SemanticType
    description: str | None = None

    @property
    def required(self) -> bool:
        """Numeric and boolean parameters are required; strings and structures are optional."""
        return self.semantic_type.is_scalar_non_nullable

    def to_property_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.semantic_type.value}
        if self.description is not None:
            schema["description"] = self.description
        return schema


class ToolDescriptor(BaseModel):
    """Name, description and ordered parameter list of a tool."""

    model_config = {"frozen": True}

    name: str
    description: str = ""
    parameters: tuple[ParameterDescriptor, ...] = ()

    @property
    def required_parameters(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def to_schema(self) -> dict[str, Any]:
        """Render the descriptor the way ``tools/list`` publishes it."""
        input_schema: dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.to_property_schema() for p in self.parameters},
        }
        required = self.required_parameters
        if required:
            input_schema["required"] = required
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": input_schema,
        }


class ToolOperation(BaseModel):
    """A descriptor paired with the callable that implements it.

    ``handler`` is called with positional arguments in the descriptor's
    parameter order.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    descriptor: ToolDescriptor
    handler: Callable[..., Any] = Field(repr=False)

    @property
    def name(self) -> str:
        return self.descriptor.name
