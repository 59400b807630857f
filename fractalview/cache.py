"""A memo that remembers only the most recent request."""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SingleCache(Generic[K, V]):
    """Holds at most one ``(key, value)`` pair.

    A request with the stored key returns the stored value. Any other key
    runs the generator and replaces the stored pair with the new one. If the
    generator raises, the stored pair is left as it was.
    """

    def __init__(self) -> None:
        self._entry: Optional[Tuple[K, V]] = None

    def get_or_set(self, key: K, generator: Callable[[], V]) -> V:
        if self._entry is not None and self._entry[0] == key:
            return self._entry[1]

        value = generator()
        self._entry = (key, value)
        return value

    @property
    def key(self) -> Optional[K]:
        return None if self._entry is None else self._entry[0]

    def clear(self) -> None:
        self._entry = None

    def __len__(self) -> int:
        return 0 if self._entry is None else 1
