"""Command Pattern for input handling.

Commands encapsulate actions that can be triggered by various inputs.
Each command has an execute() method and optional can_execute() for guards.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .screen import WallpaperScreen

from .types import TouchPoint
from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, screen: "WallpaperScreen") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, screen: "WallpaperScreen") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Touch Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class TouchDown(Command):
    """Finger down on the wallpaper."""
    point: TouchPoint

    def can_execute(self, screen: "WallpaperScreen") -> bool:
        return not screen.state.is_loading

    def execute(self, screen: "WallpaperScreen") -> bool:
        if not self.can_execute(screen):
            return False
        screen.handle_touch_down(self.point)
        return True


@dataclass
class TouchRelease(Command):
    """Finger lifted, or the gesture was taken away."""
    cancelled: bool = False

    def execute(self, screen: "WallpaperScreen") -> bool:
        screen.handle_touch_end(self.cancelled)
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Carousel Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class SettleCarousel(Command):
    """Swipe momentum stopped on an item."""
    index: int

    def can_execute(self, screen: "WallpaperScreen") -> bool:
        carousel = screen.state.carousel
        return (not screen.state.is_loading and
                0 <= self.index < carousel.item_count and
                self.index != carousel.current())

    def execute(self, screen: "WallpaperScreen") -> bool:
        if not self.can_execute(screen):
            return False
        screen.handle_settle(self.index)
        return True


@dataclass
class ReloadFeed(Command):
    """Fetch a new random selection."""

    def can_execute(self, screen: "WallpaperScreen") -> bool:
        return not screen.reload_requested and not screen.state.hud.is_active

    def execute(self, screen: "WallpaperScreen") -> bool:
        if not self.can_execute(screen):
            return False
        log("[CMD] ReloadFeed")
        screen.request_reload()
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Save / App Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class SaveCurrent(Command):
    """Save the centered wallpaper without a double-tap."""

    def can_execute(self, screen: "WallpaperScreen") -> bool:
        return screen.state.current_photo is not None and not screen.state.hud.is_active

    def execute(self, screen: "WallpaperScreen") -> bool:
        if not self.can_execute(screen):
            return False
        return screen.save_current()


@dataclass
class CloseApp(Command):
    """Close the application."""

    def execute(self, screen: "WallpaperScreen") -> bool:
        log("[CMD] CloseApp")
        return True
