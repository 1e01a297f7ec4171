"""mcp-restify — Model Context Protocol tools served over JSON-RPC 2.0."""

from __future__ import annotations

__version__ = "1.0.0"
