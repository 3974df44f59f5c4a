"""State management submodules for SplashWalls."""

from .carousel import CarouselTracker
from .hud import SavePhase, SaveStatusController
from .screen import ScreenState

__all__ = [
    'CarouselTracker',
    'SavePhase',
    'SaveStatusController',
    'ScreenState',
]
