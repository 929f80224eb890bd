"""
Byte strings and the string builder.

A ``Str`` is a non-owning ``[start, end)`` byte range. Strings that come from a
``StringBuilder`` (or ``Str.of``) are followed by a ``\\0`` terminator at
``end``. Because ``start`` is mutable, a ``Str`` doubles as the parser cursor:
consuming input just advances ``start``.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..memory.arena import Arena
from ..memory.buffer import GrowableBuffer
from ..memory.view import View, copy_to_arena, drain_to_arena
from .constants import TERMINATOR, WHITESPACE

ByteStorage = Union[bytes, bytearray]
StrLike = Union["Str", bytes, bytearray, str]


def _content(value: StrLike) -> bytes:
    if isinstance(value, Str):
        return value.to_bytes()
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


@dataclass(eq=False)
class Str:
    """Non-owning byte range ``data[start:end]``."""

    data: ByteStorage
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.data):
            raise ValueError(
                f"Str [{self.start}, {self.end}) out of bounds for "
                f"storage of length {len(self.data)}"
            )

    @classmethod
    def of(cls, text: Union[str, bytes, bytearray]) -> "Str":
        """Create a terminated string owning a copy of ``text``."""
        content = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        return cls(content + bytes((TERMINATOR,)), 0, len(content))

    def __len__(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def copy(self) -> "Str":
        """Another range over the same bytes."""
        return Str(self.data, self.start, self.end)

    def peek(self, offset: int = 0) -> int:
        """Byte at ``start + offset``, or the terminator past the end."""
        index = self.start + offset
        if index >= self.end:
            return TERMINATOR
        return self.data[index]

    def advance(self, count: int = 1) -> None:
        """Consume ``count`` bytes (clamped to the end)."""
        self.start = min(self.start + count, self.end)

    def trim_left(self) -> "Str":
        """Skip leading spaces, tabs and newlines without copying."""
        start = self.start
        while start < self.end and self.data[start] in WHITESPACE:
            start += 1
        return Str(self.data, start, self.end)

    def starts_with(self, prefix: StrLike) -> bool:
        prefix_bytes = _content(prefix)
        if len(self) < len(prefix_bytes):
            return False
        return self.data[self.start:self.start + len(prefix_bytes)] == prefix_bytes

    def ends_with(self, suffix: StrLike) -> bool:
        suffix_bytes = _content(suffix)
        if len(self) < len(suffix_bytes):
            return False
        return self.data[self.end - len(suffix_bytes):self.end] == suffix_bytes

    def equals(self, other: StrLike) -> bool:
        """Byte equality up to the first terminator (or the end)."""
        return _until_terminator(self.to_bytes()) == _until_terminator(_content(other))

    def compare(self, other: StrLike) -> int:
        """
        Three-way comparison that also reports where the strings differ.

        Returns 0 when equal, ``1 + i`` when this string is greater at the first
        differing index ``i`` and ``-1 - i`` when ``other`` is. When one string
        is a prefix of the other the index is the shorter length, which is
        where the shorter string's terminator is met.
        """
        first, second = self.to_bytes(), _content(other)
        for index, (a, b) in enumerate(zip(first, second)):
            if a > b:
                return 1 + index
            if a < b:
                return -1 - index
        if len(first) > len(second):
            return 1 + len(second)
        if len(second) > len(first):
            return -1 - len(first)
        return 0

    def to_bytes(self) -> bytes:
        """Copy of the content bytes, terminator excluded."""
        return bytes(self.data[self.start:self.end])

    def decode(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self.to_bytes().decode(encoding, errors)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.decode(errors="replace")

    def __repr__(self) -> str:
        return f"Str({self.to_bytes()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Str, bytes, bytearray)):
            return self.to_bytes() == _content(other)
        return NotImplemented


def _until_terminator(content: bytes) -> bytes:
    index = content.find(TERMINATOR)
    return content if index < 0 else content[:index]


def view_of_str(text: Str) -> View[int]:
    """View over a string's bytes, including its terminator."""
    return View(text.data, text.start, min(text.end + 1, len(text.data)))


class StringBuilder(GrowableBuffer[int]):
    """
    Growable byte buffer whose last byte is always the terminator.

    Formatting and arena finalisation need an arena; pass one at construction.
    """

    def __init__(self, arena: Optional[Arena] = None, max_capacity: Optional[int] = None):
        super().__init__(item_size=1, max_capacity=max_capacity)
        self.arena = arena

    def _new_store(self, capacity: int) -> bytearray:
        return bytearray(capacity)

    def _require_arena(self) -> Arena:
        if self.arena is None:
            raise ValueError("this operation needs a StringBuilder created with an arena")
        return self.arena

    @property
    def length(self) -> int:
        """Number of content bytes (terminator excluded)."""
        return max(self._count - 1, 0)

    def push(self, item: int) -> None:
        """Append one content byte, moving the terminator after it."""
        if self._count == 0:
            super().append(bytes((item, TERMINATOR)))
            return
        self._reserve(1)
        self._store[self._count - 1] = item
        self._store[self._count] = TERMINATOR
        self._count += 1

    def push_str(self, text: StrLike) -> None:
        """Append a string's content bytes and re-terminate."""
        content = _content(text)
        base = self._count - 1 if self._count else 0
        total = base + len(content) + 1
        self._reserve(total - self._count, bulk=True)
        self._store[base:base + len(content)] = content
        self._store[total - 1] = TERMINATOR
        self._count = total

    def push_formatted(self, fmt: Union[str, bytes], *args: object) -> None:
        """
        Append a printf-style formatted string.

        The rendered text is staged in the arena before being appended.
        """
        if isinstance(fmt, bytes):
            rendered = fmt % args
        else:
            rendered = (fmt % args).encode("utf-8")
        scratch = copy_to_arena(View(rendered + bytes((TERMINATOR,))), self._require_arena())
        self.push_str(Str(scratch.data, scratch.start, scratch.end - 1))  # type: ignore[arg-type]

    def build(self) -> Str:
        """String aliasing the builder's own storage."""
        if self._count == 0:
            return Str.of(b"")
        return Str(self._store, 0, self._count - 1)  # type: ignore[arg-type]

    def build_to_arena(self) -> Str:
        """Copy the content into the arena and free the builder."""
        arena = self._require_arena()
        if self._count == 0:
            super().push(TERMINATOR)
        stored = drain_to_arena(self, arena)
        return Str(stored.data, stored.start, stored.end - 1)  # type: ignore[arg-type]
