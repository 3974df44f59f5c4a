"""WallpaperScreen - the controller behind the carousel.

Owns the screen state, the tap classifier and the save worker, and turns
input events into state changes. Nothing here touches raylib; the app loop
feeds it commands and reads ScreenState to draw.
"""

from __future__ import annotations
from functools import partial
from typing import Any, Callable, List, Optional

from .config import NUM_WALLPAPERS
from .errors import FeedError, InvalidSampleRequest, SaveInProgress
from .feed import fetch_feed, pick_wallpapers
from .gestures import TapClassifier
from .logging import log
from .state import ScreenState
from .types import PhotoDescriptor, SaveOutcome, TapKind, TouchPoint


class WallpaperScreen:
    """Coordinates feed loading, the carousel, double-tap and the save HUD.

    Args:
        worker: Object with ``submit(photo, callback)`` and ``poll_ui_events()``,
            normally an AsyncSaveWorker.
        feed_loader: Callable returning the full photo list.
        state: Screen state to drive. A fresh ScreenState by default.
        rng: Random source for picking wallpapers.
        wallpaper_count: How many photos to show.
    """

    def __init__(self, worker: Any,
                 feed_loader: Callable[[], List[PhotoDescriptor]] = fetch_feed,
                 state: Optional[ScreenState] = None,
                 rng: Optional[Any] = None,
                 wallpaper_count: int = NUM_WALLPAPERS):
        self.worker = worker
        self.feed_loader = feed_loader
        self.state = state if state is not None else ScreenState()
        self.rng = rng
        self.wallpaper_count = wallpaper_count
        self.classifier = TapClassifier(on_double_tap=self._on_double_tap)
        self.reload_requested = False

    # ─── Feed ─────────────────────────────────────────────────────────────

    def load_wallpapers(self) -> bool:
        """Fetch the list and show a fresh random selection."""
        self.reload_requested = False
        self.state.start_loading()
        self.classifier.reset()
        try:
            photos = self.feed_loader()
            walls = pick_wallpapers(photos, self.wallpaper_count, rng=self.rng)
        except (FeedError, InvalidSampleRequest) as e:
            log(f"[FEED][ERR] Fetch error {e}")
            self.state.last_error = str(e)
            return False

        self.state.show_wallpapers(walls)
        log(f"[SCREEN] Showing {len(walls)} wallpapers")
        return True

    def request_reload(self) -> None:
        """Clear the carousel now and fetch on the next update()."""
        self.state.start_loading()
        self.reload_requested = True

    # ─── Touch / carousel ──────────────────────────────────────────────────

    def handle_touch_down(self, point: TouchPoint) -> Optional[TapKind]:
        """Feed a touch-down on the wallpaper surface to the classifier."""
        if self.state.is_loading:
            return None
        return self.classifier.on_touch_down(point)

    def handle_touch_end(self, cancelled: bool = False) -> None:
        if cancelled:
            self.classifier.on_cancel()
        else:
            self.classifier.on_release()

    def handle_settle(self, index: int) -> None:
        self.state.carousel.on_settle(index)

    # ─── Saving ───────────────────────────────────────────────────────────

    def _on_double_tap(self, point: TouchPoint) -> None:
        self.save_current()

    def save_current(self) -> bool:
        """Start saving the centered wallpaper. Returns False if nothing started."""
        photo = self.state.current_photo
        if photo is None:
            return False
        try:
            token = self.state.hud.begin()
        except SaveInProgress as e:
            log(f"[SCREEN] Save rejected: {e}")
            return False

        log(f"[SCREEN] Saving photo {photo.id} by {photo.author!r}")
        self.worker.submit(photo, partial(self._on_save_done, token))
        return True

    def _on_save_done(self, token: int, outcome: SaveOutcome) -> None:
        if outcome.ok:
            self.state.hud.succeed(token)
        else:
            self.state.hud.fail(token, outcome.error or "")

    # ─── Frame update ───────────────────────────────────────────────────────

    def update(self) -> None:
        """Drain save completions, advance HUD timers, run a pending reload."""
        self.worker.poll_ui_events()
        self.state.hud.update()
        if self.reload_requested:
            self.load_wallpapers()
