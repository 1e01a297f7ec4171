"""Argument binder: maps an untyped JSON argument object onto a descriptor.

Every parameter is looked up by name; the result is a positional list in the
descriptor's declared order. Fields that match no declared parameter are
ignored.
"""

from __future__ import annotations

import json
import logging
import math
from typing import TYPE_CHECKING, Any

from restify.protocol.errors import ArgumentCoercionError, InvalidParamsError, MissingParameterError
from restify.tools.models import SemanticType

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from restify.tools.models import ParameterDescriptor, ToolDescriptor

logger = logging.getLogger(__name__)


def bind_arguments(descriptor: ToolDescriptor, arguments: Mapping[str, Any] | None) -> list[Any]:
    """Return the positional argument list for *descriptor*.

    Raises:
        MissingParameterError: A required parameter is absent or null.
        ArgumentCoercionError: A value does not fit its declared type.
        InvalidParamsError: *arguments* is not an object.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        msg = f"'arguments' must be an object, got {type(arguments).__name__}"
        raise InvalidParamsError(msg)

    bound: list[Any] = []
    for param in descriptor.parameters:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                raise MissingParameterError(param.name)
            bound.append(None)
            continue
        bound.append(coerce(param, value))

    extra = set(arguments) - {p.name for p in descriptor.parameters}
    if extra:
        logger.debug("Ignoring undeclared arguments for %s: %s", descriptor.name, sorted(extra))
    return bound


def coerce(param: ParameterDescriptor, value: Any) -> Any:
    """Convert a non-null JSON value to *param*'s semantic type."""
    return _COERCERS[param.semantic_type](param, value)


def _fail(param: ParameterDescriptor, value: Any) -> ArgumentCoercionError:
    return ArgumentCoercionError(param.name, param.semantic_type.value, value)


def _to_string(param: ParameterDescriptor, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        # Scalars keep their JSON spelling: true, 3, 2.5
        return json.dumps(value)
    raise _fail(param, value)


def _to_integer(param: ParameterDescriptor, value: Any) -> int:
    if isinstance(value, bool):
        raise _fail(param, value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    # Fractional values truncate toward zero.
    return int(_to_number(param, value))


def _to_number(param: ParameterDescriptor, value: Any) -> float:
    if isinstance(value, bool):
        raise _fail(param, value)
    if not isinstance(value, (int, float, str)):
        raise _fail(param, value)
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        raise _fail(param, value) from None
    if not math.isfinite(number):
        raise _fail(param, value)
    return number


def _to_boolean(param: ParameterDescriptor, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    raise _fail(param, value)


def _to_object(param: ParameterDescriptor, value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    raise _fail(param, value)


def _to_array(param: ParameterDescriptor, value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    raise _fail(param, value)


_COERCERS: dict[SemanticType, Callable[[ParameterDescriptor, Any], Any]] = {
    SemanticType.STRING: _to_string,
    SemanticType.INTEGER: _to_integer,
    SemanticType.NUMBER: _to_number,
    SemanticType.BOOLEAN: _to_boolean,
    SemanticType.OBJECT: _to_object,
    SemanticType.ARRAY: _to_array,
}
