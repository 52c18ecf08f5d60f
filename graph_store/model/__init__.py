"""
Graph domain model (Node, Edge, GraphStore).
"""

from .node import Node
from .edge import Edge
from .store import GraphStore

__all__ = ["Node", "Edge", "GraphStore"]
