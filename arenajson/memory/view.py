"""
Non-owning views and arena draining.

A ``View`` is a ``[start, end)`` window over storage owned by someone else: an
arena region, an arena slot store or a growable buffer. It stays valid only as
long as that storage does.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Iterator, Sequence, TypeVar, Union, overload

if TYPE_CHECKING:
    from .arena import Arena
    from .buffer import GrowableBuffer

T = TypeVar("T")

BYTE_STORAGE = (bytes, bytearray, memoryview)


@dataclass(eq=False)
class View(Generic[T]):
    """Window ``data[start:end]`` that does not own ``data``."""

    data: Sequence[T]
    start: int = 0
    end: int = -1
    item_size: int = 1

    def __post_init__(self) -> None:
        if self.end < 0:
            self.end = len(self.data)
        if not 0 <= self.start <= self.end <= len(self.data):
            raise ValueError(
                f"View [{self.start}, {self.end}) out of bounds for "
                f"storage of length {len(self.data)}"
            )

    @property
    def is_bytes(self) -> bool:
        """Whether the view is over raw byte storage."""
        return isinstance(self.data, BYTE_STORAGE)

    @property
    def nbytes(self) -> int:
        """Size in bytes this view accounts for."""
        return len(self) * self.item_size

    def __len__(self) -> int:
        return self.end - self.start

    def __iter__(self) -> Iterator[T]:
        for index in range(self.start, self.end):
            yield self.data[index]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "View[T]": ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            first, last, step = index.indices(len(self))
            if step != 1:
                raise ValueError("View slices do not support steps")
            last = max(first, last)
            return View(self.data, self.start + first, self.start + last, self.item_size)
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("View index out of range")
        return self.data[self.start + index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, View):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        if self.is_bytes:
            return f"View({self.tobytes()!r})"
        return f"View({self.tolist()!r})"

    def tobytes(self) -> bytes:
        """Copy the viewed bytes out."""
        return bytes(self.data[self.start:self.end])

    def tolist(self) -> list[T]:
        """Copy the viewed items out."""
        return list(self)


def view_of(buffer: "GrowableBuffer[T]") -> View[T]:
    """Wrap the buffer's current contents in a view, without copying."""
    return buffer.view()


def copy_to_arena(view: View[T], arena: "Arena") -> View[T]:
    """Copy a view's contents into ``arena`` and return the arena-owned view."""
    if view.is_bytes:
        target: View[Any] = arena.allocate(len(view))
    else:
        target = arena.allocate_slots(len(view), view.item_size)
    target.data[target.start:target.end] = view.data[view.start:view.end]  # type: ignore[index]
    return target


def drain_to_arena(buffer: "GrowableBuffer[T]", arena: "Arena") -> View[T]:
    """
    Copy a buffer into the arena and free the buffer.

    The buffer is released even when the copy does not fit in the arena.
    """
    try:
        return copy_to_arena(buffer.view(), arena)
    finally:
        buffer.free()
