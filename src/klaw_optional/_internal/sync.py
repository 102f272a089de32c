"""aiologic integration for at-most-once initialization.

Backs the per-kind empty-Optional cache: every kind gets one cell, and every
cell is written exactly once, no matter how many threads race on first use.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable

import aiologic

__all__ = ['OnceCell', 'OnceMap']


class OnceCell[T]:
    """A cell that can be written to exactly once.

    Thread-safe using aiologic.Lock. Once a value is set, it cannot be changed.

    Examples:
        >>> cell: OnceCell[int] = OnceCell()
        >>> cell.get() is None
        True
        >>> cell.get_or_init(lambda: 42)
        42
        >>> cell.get_or_init(lambda: 100)
        42
    """

    __slots__ = ('_is_set', '_lock', '_value')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._value: T | None = None
        self._is_set = False

    def get(self) -> T | None:
        """Get the value if set, otherwise None."""
        return self._value if self._is_set else None

    def get_or_init(self, init: Callable[[], T]) -> T:
        """Get the value, or initialize it with the given function.

        Thread-safe: only one thread will call init().

        Args:
            init: Function to call to initialize the value.

        Returns:
            The stored or newly initialized value.
        """
        if self._is_set:
            return self._value  # type: ignore[return-value]

        with self._lock:
            if not self._is_set:
                self._value = init()
                self._is_set = True
            return self._value  # type: ignore[return-value]

    def is_set(self) -> bool:
        """Check if the value has been set."""
        return self._is_set


class OnceMap[K: Hashable, V]:
    """A registry of OnceCells, one per key, never evicted.

    Examples:
        >>> registry: OnceMap[str, list[int]] = OnceMap()
        >>> first = registry.get_or_init('a', list)
        >>> registry.get_or_init('a', list) is first
        True
    """

    __slots__ = ('_cells', '_lock')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._cells: dict[K, OnceCell[V]] = {}

    def _cell(self, key: K) -> OnceCell[V]:
        cell = self._cells.get(key)
        if cell is not None:
            return cell

        with self._lock:
            cell = self._cells.get(key)
            if cell is None:
                cell = OnceCell()
                self._cells[key] = cell
            return cell

    def get_or_init(self, key: K, init: Callable[[], V]) -> V:
        """Get the value stored under key, initializing it at most once.

        Args:
            key: Registry key.
            init: Function producing the value on first request for key.

        Returns:
            The value stored for key.
        """
        return self._cell(key).get_or_init(init)

    def __contains__(self, key: object) -> bool:
        cell = self._cells.get(key)  # type: ignore[arg-type]
        return cell is not None and cell.is_set()

    def __len__(self) -> int:
        return sum(1 for cell in self._cells.values() if cell.is_set())
