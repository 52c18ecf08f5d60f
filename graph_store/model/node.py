from typing import Any

from ..identifier import Identifier, canonical_id


class Node:
    def __init__(self, content: Any, node_id: Identifier):
        self._id = node_id
        self._key = canonical_id(node_id)
        self._content = content

    @property
    def id(self) -> Identifier:
        return self._id

    @property
    def key(self) -> str:
        return self._key

    @property
    def content(self) -> Any:
        return self._content

    def __repr__(self) -> str:
        return f"Node(id={self._id!r}, content={self._content!r})"
