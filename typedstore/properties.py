from typing import Any, ItemsView, KeysView

from typedstore.base import TypedStore
from typedstore.values import JsonValue, freeze, values_equal


class Properties(TypedStore):
    """A TypedStore that can also enumerate, remove and compare its entries."""

    def clear(self):
        """Drop every entry. The file keeps its content until the next save."""
        self._values.clear()

    def keys(self) -> KeysView[str]:
        return self._values.keys()

    def entries(self) -> ItemsView[str, JsonValue]:
        return self._values.items()

    def remove(self, key: str, default: Any = None) -> Any:
        return self._values.pop(key, default)

    def __delitem__(self, key: str):
        del self._values[key]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._path == other._path and values_equal(self._values, other._values)

    def __hash__(self) -> int:
        # Recomputed on every call; the values are mutable.
        return hash((self._path, freeze(self._values)))
