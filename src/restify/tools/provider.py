"""ToolProvider protocol — the contract every tool implementation satisfies.

A provider lists its operations explicitly; the registry consumes that list
as-is, so there is no runtime introspection of methods or signatures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from restify.tools.models import ToolOperation


@runtime_checkable
class ToolProvider(Protocol):
    """Exposes a fixed set of named tool operations."""

    def operations(self) -> Sequence[ToolOperation]:
        """Return every operation this provider exposes.

        Each :class:`~restify.tools.models.ToolOperation` pairs a descriptor
        with a callable taking the bound arguments positionally. The callable
        returns a string or any JSON-serializable value, and may raise
        :class:`~restify.protocol.errors.ToolInputError` for bad caller input.
        """
        ...
