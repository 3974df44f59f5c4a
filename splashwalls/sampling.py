"""Unique random sampling for picking which wallpapers to show."""

from __future__ import annotations
import random
from typing import Any, List, Optional

from .errors import InvalidSampleRequest


def unique_random_numbers(count: int, low: int, high: int,
                          rng: Optional[Any] = None) -> List[int]:
    """Draw ``count`` distinct integers from ``[low, high)``.

    Uses rejection sampling: values are drawn uniformly and duplicates are
    thrown away, so the result keeps draw order. Requests that can never be
    satisfied raise InvalidSampleRequest before anything is drawn.

    Args:
        count: Number of values wanted.
        low: Inclusive lower bound.
        high: Exclusive upper bound.
        rng: Object with a ``randrange`` method. Defaults to the random module.
    """
    if count < 0 or low > high or count > high - low:
        raise InvalidSampleRequest(count, low, high)

    rng = rng if rng is not None else random
    picked: List[int] = []
    seen = set()
    while len(picked) < count:
        value = rng.randrange(low, high)
        if value in seen:
            continue
        seen.add(value)
        picked.append(value)
    return picked
