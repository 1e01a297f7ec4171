"""Tools shipped with the server."""

from __future__ import annotations

from restify.tools.builtin.hello import HelloTool
from restify.tools.builtin.mail import OutlookMailTool
from restify.tools.registry import ToolRegistry, ToolRegistryBuilder

__all__ = ["HelloTool", "OutlookMailTool", "build_default_registry"]


def build_default_registry() -> ToolRegistry:
    """Register every built-in tool and freeze the result."""
    return ToolRegistryBuilder().register(HelloTool()).register(OutlookMailTool()).build()
