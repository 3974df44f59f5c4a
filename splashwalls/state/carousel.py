"""Carousel state - which wallpaper is centered."""

from __future__ import annotations
from dataclasses import dataclass

from ..errors import InvalidSettleIndex
from ..logging import log


@dataclass
class CarouselTracker:
    """Index of the centered carousel item.

    Only settle events (swipe momentum fully stopped) move the index. A reload
    of the backing list must go through reset() so a stale index is never
    read against the new items.
    """
    item_count: int = 0
    index: int = 0

    def on_settle(self, new_index: int) -> None:
        """Record the item the carousel settled on."""
        if (not isinstance(new_index, int) or isinstance(new_index, bool)
                or not 0 <= new_index < self.item_count):
            raise InvalidSettleIndex(new_index, self.item_count)
        if new_index != self.index:
            log(f"[CAROUSEL] Settled {self.index} -> {new_index}")
        self.index = new_index

    def current(self) -> int:
        return self.index

    def reset(self, item_count: int) -> None:
        """Start over at the first item of a freshly loaded list."""
        if item_count < 0:
            raise ValueError(f"item_count must be >= 0, got {item_count}")
        self.item_count = item_count
        self.index = 0

    @property
    def has_next(self) -> bool:
        return self.index < self.item_count - 1

    @property
    def has_prev(self) -> bool:
        return self.index > 0
