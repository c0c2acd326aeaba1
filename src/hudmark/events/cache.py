"""
Value cache: last-known value per developer-addressable element.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from hudmark.specs.node import ElementNode
from hudmark.specs.tree import walk_all
from hudmark.specs.values import Value


class ValueCache:
    """
    Mapping of user id to last observed value.

    Rebuilt from initial values on every full build and overwritten by
    value-change events. Nodes without a user id never appear here.
    """

    def __init__(self) -> None:
        self._values: dict[str, Value] = {}

    def get_value(self, user_id: str) -> Value:
        return self._values.get(user_id)

    def set_value(self, user_id: str, value: Value) -> None:
        self._values[user_id] = value

    def clear(self) -> None:
        self._values.clear()

    def rebuild(self, roots: Sequence[ElementNode]) -> None:
        """Clear, then capture initial values in document order."""
        self.clear()
        for node in walk_all(roots):
            if node.user_id is not None and node.initial_value is not None:
                self._values[node.user_id] = node.initial_value

    def load(self, values: Mapping[str, Value]) -> None:
        """Replace the whole content at once."""
        self._values = dict(values)

    def snapshot(self) -> dict[str, Value]:
        return dict(self._values)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)
