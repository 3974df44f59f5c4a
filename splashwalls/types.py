"""Core data types for SplashWalls."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
from enum import Enum, auto


class TapKind(Enum):
    """Classification result for a touch-down."""
    SINGLE_TOUCH = auto()
    DOUBLE_TAP = auto()


@dataclass(frozen=True)
class TouchPoint:
    """A touch-down position with its timestamp in milliseconds."""
    x: float
    y: float
    timestamp: int


@dataclass(frozen=True)
class TapMemory:
    """Last touch-down seen by a classifier.

    The initial sentinel sits at (0, 0) at epoch 0 and is not primed, so it
    never pairs with a real touch.
    """
    x: float = 0.0
    y: float = 0.0
    timestamp: int = 0
    primed: bool = False

    @classmethod
    def from_point(cls, point: TouchPoint) -> TapMemory:
        return cls(point.x, point.y, point.timestamp, primed=True)


EMPTY_TAP_MEMORY = TapMemory()


@dataclass(frozen=True)
class PhotoDescriptor:
    """One entry of the remote photo list."""
    id: int
    width: int
    height: int
    author: str = ""
    filename: str = ""
    author_url: str = ""
    post_url: str = ""


@dataclass(frozen=True)
class SaveOutcome:
    """Result of a persistence attempt, delivered back to the UI thread."""
    photo: PhotoDescriptor
    path: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SaveTask:
    """A task for the async save worker."""
    photo: PhotoDescriptor
    callback: Callable[[SaveOutcome], None]
    timestamp: float = 0.0


@dataclass
class UIEvent:
    """An event to be processed on the main/UI thread."""
    callback: Callable
    args: tuple
