"""Tool layer — descriptors, registry, argument binding and result formatting."""

from restify.tools.binder import bind_arguments
from restify.tools.formatter import format_result
from restify.tools.models import ParameterDescriptor, SemanticType, ToolDescriptor, ToolOperation
from restify.tools.provider import ToolProvider
from restify.tools.registry import ToolRegistry, ToolRegistryBuilder

__all__ = [
    "ParameterDescriptor",
    "SemanticType",
    "ToolDescriptor",
    "ToolOperation",
    "ToolProvider",
    "ToolRegistry",
    "ToolRegistryBuilder",
    "bind_arguments",
    "format_result",
]
