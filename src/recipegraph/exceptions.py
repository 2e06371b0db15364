"""Exceptions for recipegraph.

The resolution core never raises: missing and cyclic references are
represented structurally in the composition tree. These errors belong to
the loading and session layers around it.
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Drug catalog could not be loaded.

    Raised when the catalog file is missing, is not valid JSON, or does not
    contain a JSON array of objects.

    Attributes:
        path: Path of the catalog that failed to load
        reason: Short description of what went wrong
        message: Human-readable error message
    """

    def __init__(
        self,
        path: str | Path,
        reason: str,
        message: str | None = None,
    ) -> None:
        self.path = str(path)
        self.reason = reason
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        return f"Failed to load drug catalog '{self.path}': {self.reason}"


class UnknownNodeError(LookupError):
    """Node id is not part of the current flattened view.

    Ids are assigned per flatten pass, so an id captured before a toggle may
    no longer exist (or may point at a different node) afterwards.

    Attributes:
        node_id: The id that was requested
        known: Number of nodes in the current pass
        message: Human-readable error message
    """

    def __init__(
        self,
        node_id: int,
        known: int,
        message: str | None = None,
    ) -> None:
        self.node_id = node_id
        self.known = known
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        if self.known == 0:
            return f"Node id {self.node_id} not found: no drug is selected"
        return (
            f"Node id {self.node_id} not found in the current view "
            f"(valid ids: 0..{self.known - 1})"
        )
