"""Errors reported by the graph store."""

from __future__ import annotations

from typing import Any


class GraphStoreError(ValueError):
    """Base class for every error the store reports."""


class InvalidArgument(GraphStoreError):
    """A required value is missing or has the wrong type."""


class DuplicateIdentifier(GraphStoreError):

    def __init__(self, kind: str, identifier: Any):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"The {kind}'s id (id={identifier}) already exists.")


class UnknownEndpoint(GraphStoreError):

    def __init__(self, identifier: Any):
        self.identifier = identifier
        super().__init__(f"Edge endpoint '{identifier}' does not exist.")


class NotFound(GraphStoreError):

    def __init__(self, kind: str, identifier: Any):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.capitalize()} '{identifier}' not found.")
