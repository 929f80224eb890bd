"""
Growable buffer with geometric growth.

The buffer owns its backing store exclusively. Growth doubles the capacity
(never below ``MIN_CAPACITY``); a bulk append additionally reserves room for
the appended items. A failed growth leaves the buffer untouched.
"""

from types import TracebackType
from typing import Any, Generic, Iterator, MutableSequence, Optional, Sequence, TypeVar

from ..security.exceptions import OutOfMemoryError
from .view import View

T = TypeVar("T")


class GrowableBuffer(Generic[T]):
    """Dynamically resizing sequence with explicit count and capacity."""

    MIN_CAPACITY = 16

    def __init__(self, item_size: int = 1, max_capacity: Optional[int] = None):
        self.item_size = item_size
        self.max_capacity = max_capacity
        self._store: MutableSequence[Any] = self._new_store(0)
        self._count = 0
        self._capacity = 0

    def _new_store(self, capacity: int) -> MutableSequence[Any]:
        """Allocate a backing store for ``capacity`` items."""
        return [None] * capacity

    @property
    def count(self) -> int:
        """Number of stored items."""
        return self._count

    @property
    def capacity(self) -> int:
        """Number of items the current store can hold."""
        return self._capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for index in range(self._count):
            yield self._store[index]

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("buffer index out of range")
        return self._store[index]

    def _grow_to(self, new_capacity: int) -> None:
        if self.max_capacity is not None and new_capacity > self.max_capacity:
            raise OutOfMemoryError(
                f"Cannot grow buffer to {new_capacity} items "
                f"(limit {self.max_capacity})"
            )
        try:
            store = self._new_store(new_capacity)
        except MemoryError as exc:
            raise OutOfMemoryError(
                f"Cannot grow buffer to {new_capacity} items"
            ) from exc
        store[:self._count] = self._store[:self._count]
        self._store = store
        self._capacity = new_capacity

    def _reserve(self, extra: int, bulk: bool = False) -> None:
        """Make room for ``extra`` more items using the growth policy."""
        if self._count + extra <= self._capacity:
            return
        new_capacity = max(self._capacity * 2, self.MIN_CAPACITY)
        if bulk:
            new_capacity += extra
        self._grow_to(new_capacity)

    def push(self, item: T) -> None:
        """Append a single item."""
        self._reserve(1)
        self._store[self._count] = item
        self._count += 1

    def append(self, items: Sequence[T]) -> None:
        """Append every item of ``items`` in order."""
        size = len(items)
        self._reserve(size, bulk=True)
        self._store[self._count:self._count + size] = items  # type: ignore[assignment]
        self._count += size

    def view(self) -> View[T]:
        """View of the stored items; invalidated by growth or ``free()``."""
        return View(self._store, 0, self._count, self.item_size)

    def free(self) -> None:
        """Release the store and return to the empty state. Idempotent."""
        self._store = self._new_store(0)
        self._count = 0
        self._capacity = 0

    def __enter__(self) -> "GrowableBuffer[T]":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.free()
