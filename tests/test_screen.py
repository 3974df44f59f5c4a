import random

import pytest

from splashwalls.config import HUD_SUCCESS_MESSAGE
from splashwalls.errors import FeedError, InvalidSettleIndex
from splashwalls.screen import WallpaperScreen
from splashwalls.state import SavePhase, SaveStatusController, ScreenState
from splashwalls.types import PhotoDescriptor, SaveOutcome, TapKind, TouchPoint


class FakeWorker:
    """Holds submitted saves until the test finishes them."""

    def __init__(self):
        self.pending = []
        self.polls = 0

    def submit(self, photo, callback) -> None:
        self.pending.append((photo, callback))

    def poll_ui_events(self) -> int:
        self.polls += 1
        return 0

    def finish(self, error=None, path="/roll/photo.jpg") -> None:
        photo, callback = self.pending.pop(0)
        callback(SaveOutcome(photo, path=None if error else path, error=error))


def make_photos(n: int = 25) -> list:
    return [PhotoDescriptor(id=i, width=800, height=600, author=f"author {i}") for i in range(n)]


def make_screen(clock, photos=None, loader=None) -> WallpaperScreen:
    photos = make_photos() if photos is None else photos
    state = ScreenState(hud=SaveStatusController(clock=clock))
    return WallpaperScreen(
        FakeWorker(),
        feed_loader=loader or (lambda: photos),
        state=state,
        rng=random.Random(11),
    )


def double_tap(screen: WallpaperScreen, t0: int = 1000) -> list:
    return [
        screen.handle_touch_down(TouchPoint(100, 200, t0)),
        screen.handle_touch_down(TouchPoint(104, 203, t0 + 120)),
    ]


def test_load_shows_ten_distinct_wallpapers(clock) -> None:
    screen = make_screen(clock)

    assert screen.load_wallpapers()

    state = screen.state
    assert not state.is_loading
    assert state.count == 10
    assert len({p.id for p in state.wallpapers}) == 10
    assert state.carousel.item_count == 10
    assert state.carousel.current() == 0


def test_feed_error_keeps_loading(clock) -> None:
    def broken():
        raise FeedError("offline")

    screen = make_screen(clock, loader=broken)

    assert not screen.load_wallpapers()
    assert screen.state.is_loading
    assert "offline" in screen.state.last_error


def test_short_feed_is_reported_not_looped(clock) -> None:
    screen = make_screen(clock, photos=make_photos(4))

    assert not screen.load_wallpapers()
    assert screen.state.is_loading


def test_touch_ignored_while_loading(clock) -> None:
    screen = make_screen(clock)

    assert screen.handle_touch_down(TouchPoint(1, 1, 10)) is None


def test_double_tap_saves_settled_photo(clock) -> None:
    screen = make_screen(clock)
    screen.load_wallpapers()
    screen.handle_settle(3)

    kinds = double_tap(screen)

    assert kinds == [TapKind.SINGLE_TOUCH, TapKind.DOUBLE_TAP]
    assert screen.state.hud.phase is SavePhase.ACTIVE
    assert [photo for photo, _ in screen.worker.pending] == [screen.state.wallpapers[3]]


def test_save_success_runs_full_hud_cycle(clock) -> None:
    screen = make_screen(clock)
    screen.load_wallpapers()
    double_tap(screen)

    screen.worker.finish()
    assert screen.state.hud.phase is SavePhase.RESULT
    assert screen.state.hud.message == HUD_SUCCESS_MESSAGE

    clock.advance(0.6)
    screen.update()
    assert screen.state.hud.is_idle
    assert not screen.state.hud.visible


def test_save_failure_shows_reason(clock) -> None:
    screen = make_screen(clock)
    screen.load_wallpapers()
    double_tap(screen)

    screen.worker.finish(error="download failed: 500")

    assert screen.state.hud.phase is SavePhase.RESULT
    assert "download failed: 500" in screen.state.hud.message
    clock.advance(0.6)
    screen.update()
    assert screen.state.hud.phase is SavePhase.RESULT
    clock.advance(0.4)
    screen.update()
    assert screen.state.hud.is_idle


def test_third_quick_tap_does_not_start_second_save(clock) -> None:
    screen = make_screen(clock)
    screen.load_wallpapers()
    double_tap(screen)

    kind = screen.handle_touch_down(TouchPoint(104, 203, 1200))

    assert kind is TapKind.DOUBLE_TAP
    assert len(screen.worker.pending) == 1


def test_late_completion_after_timeout_is_ignored(clock) -> None:
    screen = make_screen(clock)
    screen.load_wallpapers()
    double_tap(screen)

    clock.advance(screen.state.hud.timeout_ms / 1000.0 + 0.1)
    screen.update()
    assert screen.state.hud.last_ok is False

    screen.worker.finish()
    assert screen.state.hud.last_ok is False


def test_reload_resets_carousel_before_new_settles(clock) -> None:
    screen = make_screen(clock)
    screen.load_wallpapers()
    screen.handle_settle(3)

    screen.request_reload()
    assert screen.state.carousel.current() == 0
    assert screen.state.current_photo is None
    with pytest.raises(InvalidSettleIndex):
        screen.handle_settle(3)

    screen.update()
    assert not screen.reload_requested
    assert not screen.state.is_loading
    assert screen.state.carousel.current() == 0
    assert screen.worker.polls == 1


def test_reload_forgets_previous_tap(clock) -> None:
    screen = make_screen(clock)
    screen.load_wallpapers()
    screen.handle_touch_down(TouchPoint(50, 50, 1000))

    screen.load_wallpapers()

    assert screen.handle_touch_down(TouchPoint(50, 50, 1050)) is TapKind.SINGLE_TOUCH
