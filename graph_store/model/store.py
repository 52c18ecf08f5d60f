import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..errors import (
    DuplicateIdentifier,
    GraphStoreError,
    InvalidArgument,
    NotFound,
    UnknownEndpoint,
)
from ..identifier import Identifier, canonical_id, is_identifier
from ..result import Result
from .edge import DEFAULT_WEIGHT, Edge, validate_weight
from .node import Node

logger = logging.getLogger(__name__)


def _lookup_key(identifier: Any) -> Optional[str]:
    # Queries treat an unusable identifier as a miss instead of an error
    if not is_identifier(identifier):
        return None
    return canonical_id(identifier)


class GraphStore:
    """
    In-memory registry of nodes and directed, weighted edges.

    Nodes and edges live in two insertion-ordered dicts keyed by the canonical
    identifier string. Adds validate their input and report failures through
    the returned ``Result``; removals of unknown identifiers are silent no-ops.
    Removing a node also removes every edge that starts or ends at it.
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self._edges: Dict[str, Edge] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: Any) -> bool:
        return self.has_node(node_id)

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self._nodes)}, edges={len(self._edges)})"

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def has_node(self, node_id: Identifier) -> bool:
        key = _lookup_key(node_id)
        return key is not None and key in self._nodes

    def add_node(self, content: Any, node_id: Identifier) -> Result:
        if content is None or node_id is None:
            return self._reject(InvalidArgument("The node is not correctly defined."))
        if not is_identifier(node_id):
            return self._reject(InvalidArgument(
                f"Node id must be a string or a number, got {type(node_id).__name__}."
            ))

        key = canonical_id(node_id)
        if key in self._nodes:
            return self._reject(DuplicateIdentifier("node", node_id))

        node = Node(content, node_id)
        self._nodes[key] = node
        logger.debug("Added node %r", node_id)
        return Result.success(node)

    def remove_node(self, node_id: Identifier) -> Result:
        key = _lookup_key(node_id)
        if key is None or key not in self._nodes:
            return Result.success(())

        node = self._nodes.pop(key)
        cascaded = [
            edge for edge in self._edges.values()
            if edge.start_node.key == key or edge.end_node.key == key
        ]
        for edge in cascaded:
            del self._edges[edge.key]

        logger.debug("Removed node %r and %d incident edge(s)", node_id, len(cascaded))
        return Result.success((node, *cascaded))

    def get_node(self, node_id: Identifier) -> Optional[Node]:
        key = _lookup_key(node_id)
        if key is None:
            return None
        return self._nodes.get(key)

    def require_node(self, node_id: Identifier) -> Node:
        node = self.get_node(node_id)
        if node is None:
            raise NotFound("node", node_id)
        return node

    def get_nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes.values())

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def has_edge(self, edge_id: Identifier) -> bool:
        key = _lookup_key(edge_id)
        return key is not None and key in self._edges

    def add_edge(self, start_id: Identifier, end_id: Identifier,
                 edge_id: Identifier, weight: float = DEFAULT_WEIGHT) -> Result:
        if start_id is None or end_id is None or edge_id is None:
            return self._reject(InvalidArgument("The edge is not correctly defined."))
        for value in (start_id, end_id, edge_id):
            if not is_identifier(value):
                return self._reject(InvalidArgument(
                    f"Edge identifiers must be strings or numbers, got {type(value).__name__}."
                ))
        try:
            validate_weight(weight)
        except InvalidArgument as exc:
            return self._reject(exc)

        start_node = self.get_node(start_id)
        if start_node is None:
            return self._reject(UnknownEndpoint(start_id))
        end_node = self.get_node(end_id)
        if end_node is None:
            return self._reject(UnknownEndpoint(end_id))

        key = canonical_id(edge_id)
        if key in self._edges:
            return self._reject(DuplicateIdentifier("edge", edge_id))

        edge = Edge(start_node, end_node, edge_id, weight)
        self._edges[key] = edge
        logger.debug("Added edge %r (%r -> %r, weight=%r)", edge_id, start_id, end_id, weight)
        return Result.success(edge)

    def remove_edge(self, edge_id: Identifier) -> Result:
        key = _lookup_key(edge_id)
        if key is None or key not in self._edges:
            return Result.success(())

        edge = self._edges.pop(key)
        logger.debug("Removed edge %r", edge_id)
        return Result.success((edge,))

    def get_edge(self, edge_id: Identifier) -> Optional[Edge]:
        key = _lookup_key(edge_id)
        if key is None:
            return None
        return self._edges.get(key)

    def require_edge(self, edge_id: Identifier) -> Edge:
        edge = self.get_edge(edge_id)
        if edge is None:
            raise NotFound("edge", edge_id)
        return edge

    def get_edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges.values())

    # -----------------
    # ADJACENCY
    # -----------------

    def get_incoming_edges(self, node_id: Identifier) -> List[Edge]:
        key = _lookup_key(node_id)
        if key is None:
            return []
        return [edge for edge in self._edges.values() if edge.end_node.key == key]

    def get_outgoing_edges(self, node_id: Identifier) -> List[Edge]:
        key = _lookup_key(node_id)
        if key is None:
            return []
        return [edge for edge in self._edges.values() if edge.start_node.key == key]

    def get_predecessors(self, node_id: Identifier) -> List[Node]:
        """Start nodes of every edge ending at ``node_id``; one entry per edge."""
        return [edge.start_node for edge in self.get_incoming_edges(node_id)]

    def get_successors(self, node_id: Identifier) -> List[Node]:
        """End nodes of every edge starting at ``node_id``; one entry per edge."""
        return [edge.end_node for edge in self.get_outgoing_edges(node_id)]

    # -----------------
    # FILTERS / SEARCH
    # -----------------

    def filter_nodes(self, predicate: Callable[[Node], bool]) -> List[Node]:
        return [node for node in self._nodes.values() if predicate(node)]

    def filter_edges(self, predicate: Callable[[Edge], bool]) -> List[Edge]:
        return [edge for edge in self._edges.values() if predicate(edge)]

    def find_edges_by_weight(self, min_weight: Optional[float] = None,
                             max_weight: Optional[float] = None) -> List[Edge]:
        """Return edges whose weight is within the given range."""
        def predicate(edge: Edge) -> bool:
            if min_weight is not None and edge.weight < min_weight:
                return False
            if max_weight is not None and edge.weight > max_weight:
                return False
            return True
        return self.filter_edges(predicate)

    @staticmethod
    def _reject(error: GraphStoreError) -> Result:
        logger.warning("Error : %s", error)
        return Result.failure(error)
