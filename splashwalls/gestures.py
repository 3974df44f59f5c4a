"""Double-tap recognition for the wallpaper surface.

Classification is a pure function of the new touch and the previous
touch-down. TapClassifier only owns that memory and fires the double-tap
callback; it never reads platform input itself.
"""

from __future__ import annotations
from typing import Callable, Optional, Tuple

from .config import DOUBLE_TAP_DELAY_MS, DOUBLE_TAP_RADIUS
from .errors import InvalidTouch
from .logging import log
from .math_utils import distance, is_finite
from .types import EMPTY_TAP_MEMORY, TapKind, TapMemory, TouchPoint


def validate_touch(point: TouchPoint) -> TouchPoint:
    """Return point unchanged, or raise InvalidTouch if it is malformed."""
    if not is_finite(point.x, point.y):
        raise InvalidTouch(f"non-finite touch position ({point.x}, {point.y})")
    if not isinstance(point.timestamp, int) or point.timestamp < 0:
        raise InvalidTouch(f"bad touch timestamp {point.timestamp!r}")
    return point


def is_double_tap(point: TouchPoint, memory: TapMemory,
                  delay_ms: int = DOUBLE_TAP_DELAY_MS,
                  radius: float = DOUBLE_TAP_RADIUS) -> bool:
    """Check whether point completes a double tap with the remembered touch."""
    if not memory.primed:
        return False
    dt = point.timestamp - memory.timestamp
    return dt < delay_ms and distance(memory.x, memory.y, point.x, point.y) < radius


def classify_touch(point: TouchPoint, memory: TapMemory,
                   delay_ms: int = DOUBLE_TAP_DELAY_MS,
                   radius: float = DOUBLE_TAP_RADIUS) -> Tuple[TapKind, TapMemory]:
    """Classify a touch-down and return (kind, memory for the next touch).

    The returned memory is always the current point, so consecutive pairs are
    compared in a sliding window: three quick taps give single, double, double.
    """
    kind = TapKind.DOUBLE_TAP if is_double_tap(point, memory, delay_ms, radius) else TapKind.SINGLE_TOUCH
    return kind, TapMemory.from_point(point)


class TapClassifier:
    """Per-surface gesture recognizer holding the last touch-down."""

    def __init__(self, on_double_tap: Optional[Callable[[TouchPoint], None]] = None,
                 delay_ms: int = DOUBLE_TAP_DELAY_MS,
                 radius: float = DOUBLE_TAP_RADIUS):
        self.on_double_tap = on_double_tap
        self.delay_ms = delay_ms
        self.radius = radius
        self._memory: TapMemory = EMPTY_TAP_MEMORY

    @property
    def memory(self) -> TapMemory:
        return self._memory

    def should_set_responder(self) -> bool:
        """Touch-start always makes this surface the gesture owner."""
        return True

    def on_touch_down(self, point: TouchPoint) -> TapKind:
        """Classify a touch-down, remember it, and fire the double-tap callback."""
        validate_touch(point)
        kind, self._memory = classify_touch(point, self._memory, self.delay_ms, self.radius)
        if kind is TapKind.DOUBLE_TAP:
            log(f"[TAP] Double tap at ({point.x:.0f}, {point.y:.0f})")
            if self.on_double_tap is not None:
                self.on_double_tap(point)
        return kind

    def on_release(self) -> None:
        """Finger lifted. Nothing to do; memory is kept for the next touch."""

    def on_cancel(self) -> None:
        """Gesture taken by another responder. Same as release."""
        self.on_release()

    def reset(self) -> None:
        """Forget the previous touch."""
        self._memory = EMPTY_TAP_MEMORY
