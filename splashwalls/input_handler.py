"""Input Handler - maps raylib input events to commands.

The mouse stands in for the touch surface: a left press is a touch-down,
a release ends the gesture. Arrow keys and the wheel move the carousel one
item and report it as settled, since there is no swipe momentum on desktop.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .screen import WallpaperScreen

from .rl_compat import rl, mouse_position
from .commands import (
    Command,
    TouchDown, TouchRelease,
    SettleCarousel, ReloadFeed, SaveCurrent,
    CloseApp,
)
from .config import KEY_NEXT_WALL, KEY_PREV_WALL, KEY_RELOAD, KEY_SAVE, KEY_CLOSE
from .types import TouchPoint
from .logging import now_ms

MOUSE_BUTTON_LEFT = 0


@dataclass
class InputHandler:
    """Handles input polling and command generation."""

    # Key bindings (can be customized)
    key_next: List[int] = field(default_factory=lambda: [KEY_NEXT_WALL])
    key_prev: List[int] = field(default_factory=lambda: [KEY_PREV_WALL])
    key_reload: int = KEY_RELOAD
    key_save: int = KEY_SAVE
    key_close: int = KEY_CLOSE

    def _any_pressed(self, keys: List[int]) -> bool:
        return any(rl.IsKeyPressed(k) for k in keys)

    def poll(self, screen: "WallpaperScreen") -> List[Command]:
        """Poll all inputs and return list of commands to execute."""
        commands: List[Command] = []

        if rl.IsKeyPressed(self.key_close):
            commands.append(CloseApp())
            return commands

        # ─── Touch surface ───────────────────────────────────────────────────
        if rl.IsMouseButtonPressed(MOUSE_BUTTON_LEFT):
            x, y = mouse_position()
            commands.append(TouchDown(point=TouchPoint(x, y, now_ms())))
        if rl.IsMouseButtonReleased(MOUSE_BUTTON_LEFT):
            commands.append(TouchRelease())

        # ─── Carousel ────────────────────────────────────────────────────────
        current = screen.state.carousel.current()
        wheel = rl.GetMouseWheelMove()
        if self._any_pressed(self.key_next) or wheel < 0:
            commands.append(SettleCarousel(index=current + 1))
        elif self._any_pressed(self.key_prev) or wheel > 0:
            commands.append(SettleCarousel(index=current - 1))

        # ─── Actions ─────────────────────────────────────────────────────────
        if rl.IsKeyPressed(self.key_save):
            commands.append(SaveCurrent())
        if rl.IsKeyPressed(self.key_reload):
            commands.append(ReloadFeed())

        return commands


# Singleton instance for convenience
_default_handler: Optional[InputHandler] = None


def get_input_handler() -> InputHandler:
    """Get the default input handler instance."""
    global _default_handler
    if _default_handler is None:
        _default_handler = InputHandler()
    return _default_handler
