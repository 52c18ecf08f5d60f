from numbers import Real

from ..errors import InvalidArgument
from ..identifier import Identifier, canonical_id
from .node import Node

DEFAULT_WEIGHT = 1


def validate_weight(weight) -> None:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidArgument(f"Edge weight must be a number, got {weight!r}.")


class Edge:
    """
    Directed, weighted connection between two nodes.

    The endpoint nodes are resolved once when the edge is created. The edge
    does not own them; the store removes the edge before either endpoint
    leaves the store.
    """

    def __init__(self, start_node: Node, end_node: Node,
                 edge_id: Identifier,
                 weight: float = DEFAULT_WEIGHT):
        validate_weight(weight)
        self._id = edge_id
        self._key = canonical_id(edge_id)
        self._start_node = start_node
        self._end_node = end_node
        self._weight = weight

    @property
    def id(self) -> Identifier:
        return self._id

    @property
    def key(self) -> str:
        return self._key

    @property
    def start_node(self) -> Node:
        return self._start_node

    @property
    def end_node(self) -> Node:
        return self._end_node

    @property
    def start_id(self) -> Identifier:
        return self._start_node.id

    @property
    def end_id(self) -> Identifier:
        return self._end_node.id

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, weight: float) -> None:
        validate_weight(weight)
        self._weight = weight

    def set_weight(self, weight: float) -> None:
        self.weight = weight

    def __repr__(self) -> str:
        return (f"Edge(id={self._id!r}, start={self.start_id!r}, "
                f"end={self.end_id!r}, weight={self._weight!r})")
