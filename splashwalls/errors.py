"""Error types raised by SplashWalls components."""

from __future__ import annotations


class SplashWallsError(Exception):
    """Base class for all SplashWalls errors."""


class InvalidSampleRequest(SplashWallsError, ValueError):
    """Requested unique sample cannot be drawn from the given range."""

    def __init__(self, count: int, low: int, high: int):
        self.count = count
        self.low = low
        self.high = high
        super().__init__(
            f"cannot draw {count} unique values from range [{low}, {high})"
        )


class InvalidTouch(SplashWallsError, ValueError):
    """Touch point with non-finite coordinates or a negative timestamp."""


class InvalidSettleIndex(SplashWallsError, IndexError):
    """Settle event for an index outside the current item list."""

    def __init__(self, index: object, item_count: int):
        self.index = index
        self.item_count = item_count
        super().__init__(f"settle index {index!r} out of range for {item_count} items")


class SaveInProgress(SplashWallsError):
    """A save cycle is already active on the status controller."""


class SaveFailed(SplashWallsError):
    """The persistence action reported a failure."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class FeedError(SplashWallsError):
    """Photo list could not be fetched or decoded."""
