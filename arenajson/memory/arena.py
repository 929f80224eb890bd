"""
Bump-pointer arena allocator.

An arena hands out windows of a single region and only ever frees everything
at once through ``reset()``. The region starts small and is extended in
place, doubling up to ``capacity``, so views stay valid across growth. The
arena never resets itself: the owner resets it between units of work, and
must not keep views across a reset.
"""

from typing import Any, Optional

from ..security.exceptions import ArenaOverflowError
from ..utils.config import DEFAULT_ARENA_CAPACITY, ParseConfig
from ..utils.diagnostics import Diagnostics
from .view import View

INITIAL_REGION_SIZE = 0x1000


class Arena:
    """Fixed-capacity bump allocator for bytes and typed slots."""

    def __init__(
        self,
        capacity: int = DEFAULT_ARENA_CAPACITY,
        diagnostics: Optional[Diagnostics] = None,
    ):
        if capacity <= 0:
            raise ValueError("arena capacity must be positive")
        self.capacity = capacity
        self.used = 0
        self.diagnostics = diagnostics or Diagnostics(name=__name__)
        self._region: Optional[bytearray] = None
        self._slots: list[Any] = []
        self._slot_top = 0

    @classmethod
    def from_config(
        cls, config: ParseConfig, diagnostics: Optional[Diagnostics] = None
    ) -> "Arena":
        """Create an arena sized by ``config``."""
        return cls(
            config.arena_capacity,
            diagnostics or Diagnostics(config.log, name=__name__),
        )

    @property
    def remaining(self) -> int:
        """Bytes still available before the arena overflows."""
        return self.capacity - self.used

    @property
    def initialized(self) -> bool:
        """Whether the backing region has been reserved yet."""
        return self._region is not None

    @property
    def reserved(self) -> int:
        """Bytes currently backed by the region (at most ``capacity``)."""
        return len(self._region) if self._region is not None else 0

    def _reserve(self, size: int) -> None:
        if size < 0:
            raise ValueError("allocation size must not be negative")
        if self._region is None:
            self._region = bytearray()
        if size > self.remaining:
            self.diagnostics.error(
                f"overflow of temporary arena! requested {size} bytes, "
                f"{self.remaining} of {self.capacity} remaining"
            )
            raise ArenaOverflowError(size, self.remaining)

    def _grow_region(self, needed: int) -> None:
        assert self._region is not None
        current = len(self._region)
        if needed <= current:
            return
        target = min(max(current * 2, INITIAL_REGION_SIZE, needed), self.capacity)
        self._region.extend(bytes(target - current))

    def allocate(self, size: int) -> View[int]:
        """Take ``size`` bytes from the unused tail of the region."""
        self._reserve(size)
        self._grow_region(self.used + size)
        assert self._region is not None
        start = self.used
        self.used += size
        return View(self._region, start, start + size)

    def allocate_slots(self, count: int, item_size: int) -> View[Any]:
        """
        Take ``count`` object slots, charged as ``count * item_size`` bytes.

        Slots are reused after ``reset()`` exactly like region bytes are.
        """
        self._reserve(count * item_size)
        start = self._slot_top
        end = start + count
        if end > len(self._slots):
            self._slots.extend([None] * (end - len(self._slots)))
        self._slot_top = end
        self.used += count * item_size
        return View(self._slots, start, end, item_size)

    def reset(self) -> None:
        """Forget every allocation. Memory is neither zeroed nor released."""
        self.used = 0
        self._slot_top = 0
