"""Result formatting: wrap raw tool output in the MCP content array."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def format_result(value: Any) -> dict[str, Any]:
    """Return ``{"content": [{"type": "text", "text": ...}]}`` for *value*.

    Strings pass through verbatim; anything else is rendered as JSON. If that
    fails the value's ``str()`` is used instead. Never raises.
    """
    return {"content": [{"type": "text", "text": to_text(value)}]}


def to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, default=_jsonable, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Falling back to str() for %s result: %s", type(value).__name__, exc)
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__}>"


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (set, frozenset)):
        return list(value)
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)
