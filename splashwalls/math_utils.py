"""Pure math utilities - no external dependencies."""

from __future__ import annotations
import math


def distance_squared(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared distance between two points (avoids sqrt for comparisons)."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance_squared(x1, y1, x2, y2))


def is_finite(*values: float) -> bool:
    """True if every value is a finite number."""
    return all(math.isfinite(v) for v in values)
