"""Outcome of a mutating store call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .errors import GraphStoreError


@dataclass(frozen=True)
class Result:
    """
    Success or failure of a store mutation.

    A failed result carries the error and means the store was left untouched.
    A successful one carries the created record (adds) or the tuple of
    removed records (removals).
    """

    value: Any = None
    error: Optional[GraphStoreError] = None

    @classmethod
    def success(cls, value: Any = None) -> Result:
        return cls(value=value)

    @classmethod
    def failure(cls, error: GraphStoreError) -> Result:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        """Return the value, or raise the error of a failed result."""
        if self.error is not None:
            raise self.error
        return self.value
