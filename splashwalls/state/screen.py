"""Composite ScreenState - everything the wallpaper screen shows."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .carousel import CarouselTracker
from .hud import SaveStatusController
from ..types import PhotoDescriptor


@dataclass
class ScreenState:
    """State for the wallpaper screen.

    Sub-states:
        state.carousel.current()
        state.hud.phase
    """
    is_loading: bool = True
    wallpapers: List[PhotoDescriptor] = field(default_factory=list)
    carousel: CarouselTracker = field(default_factory=CarouselTracker)
    hud: SaveStatusController = field(default_factory=SaveStatusController)
    last_error: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.wallpapers)

    @property
    def current_photo(self) -> Optional[PhotoDescriptor]:
        """Wallpaper under the carousel index, or None while loading."""
        if self.is_loading:
            return None
        idx = self.carousel.current()
        if 0 <= idx < len(self.wallpapers):
            return self.wallpapers[idx]
        return None

    def show_wallpapers(self, walls: List[PhotoDescriptor]) -> None:
        """Replace the list and point the carousel at its first item."""
        self.wallpapers = list(walls)
        self.carousel.reset(len(self.wallpapers))
        self.is_loading = False
        self.last_error = None

    def start_loading(self) -> None:
        """Drop the current list before a reload."""
        self.is_loading = True
        self.wallpapers = []
        self.carousel.reset(0)
