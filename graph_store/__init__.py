"""Public API exports for the in-memory graph store."""

from .errors import (
    DuplicateIdentifier,
    GraphStoreError,
    InvalidArgument,
    NotFound,
    UnknownEndpoint,
)
from .identifier import Identifier, canonical_id, ids_equal, is_identifier
from .model import Node, Edge, GraphStore
from .result import Result

__version__ = "0.1.0"

__all__ = [
    "GraphStore",
    "Node",
    "Edge",
    "Result",
    "Identifier",
    "canonical_id",
    "ids_equal",
    "is_identifier",
    "GraphStoreError",
    "InvalidArgument",
    "DuplicateIdentifier",
    "UnknownEndpoint",
    "NotFound",
]
