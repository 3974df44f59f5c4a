"""Save HUD state - the transient "Saving..." overlay."""

from __future__ import annotations
from enum import Enum, auto
from typing import Callable, Optional

from ..config import (
    HUD_DEFAULT_MESSAGE, HUD_SUCCESS_MESSAGE,
    HUD_SUCCESS_HIDE_MS, HUD_FAILURE_HIDE_MS, SAVE_TIMEOUT_MS,
)
from ..errors import SaveInProgress
from ..logging import log, now


class SavePhase(Enum):
    """Lifecycle phases of the save overlay."""
    IDLE = auto()
    ACTIVE = auto()
    RESULT = auto()


def failure_message(reason: str) -> str:
    """HUD text shown when a save fails."""
    return f"Save failed: {reason}" if reason else "Save failed"


class SaveStatusController:
    """Drives the overlay through Idle -> Active -> Result -> Idle.

    Each begin() opens a new cycle and hands back its token; only completions
    carrying the current token move the state machine. A second begin() while
    a cycle is Active is rejected with SaveInProgress. Deadlines are checked in
    update(), which the frame loop calls every tick.
    """

    def __init__(self, clock: Callable[[], float] = now,
                 success_hide_ms: int = HUD_SUCCESS_HIDE_MS,
                 failure_hide_ms: int = HUD_FAILURE_HIDE_MS,
                 timeout_ms: int = SAVE_TIMEOUT_MS):
        self._clock = clock
        self.success_hide_ms = success_hide_ms
        self.failure_hide_ms = failure_hide_ms
        self.timeout_ms = timeout_ms

        self.phase: SavePhase = SavePhase.IDLE
        self.message: str = HUD_DEFAULT_MESSAGE
        self.visible: bool = False
        self.cycle: int = 0
        self.last_ok: Optional[bool] = None
        self._reset_at: Optional[float] = None
        self._timeout_at: Optional[float] = None

    @property
    def is_idle(self) -> bool:
        return self.phase is SavePhase.IDLE

    @property
    def is_active(self) -> bool:
        return self.phase is SavePhase.ACTIVE

    @property
    def has_pending_reset(self) -> bool:
        return self._reset_at is not None

    def begin(self) -> int:
        """Enter Active and return the token for this cycle."""
        if self.is_active:
            raise SaveInProgress(f"save cycle {self.cycle} is still active")

        # A new cycle supersedes the previous result's hide timer
        self._reset_at = None
        self.cycle += 1
        self.phase = SavePhase.ACTIVE
        self.message = HUD_DEFAULT_MESSAGE
        self.visible = True
        self.last_ok = None
        self._timeout_at = self._clock() + self.timeout_ms / 1000.0
        log(f"[HUD] Cycle {self.cycle} active")
        return self.cycle

    def succeed(self, token: int) -> bool:
        """Finish the cycle successfully. Returns False for stale tokens."""
        return self._finish(token, True, HUD_SUCCESS_MESSAGE, self.success_hide_ms)

    def fail(self, token: int, reason: str) -> bool:
        """Finish the cycle with an error message. Returns False for stale tokens."""
        return self._finish(token, False, failure_message(reason), self.failure_hide_ms)

    def _finish(self, token: int, ok: bool, message: str, hide_ms: int) -> bool:
        if token != self.cycle or not self.is_active:
            log(f"[HUD] Ignoring completion for cycle {token} (current {self.cycle}, {self.phase.name})")
            return False

        self.phase = SavePhase.RESULT
        self.message = message
        self.last_ok = ok
        self._timeout_at = None
        self._reset_at = self._clock() + hide_ms / 1000.0
        log(f"[HUD] Cycle {token} result: {message}")
        return True

    def update(self) -> bool:
        """Fire due deadlines. Returns True if the phase changed."""
        t = self._clock()

        if self.is_active and self._timeout_at is not None and t >= self._timeout_at:
            log(f"[HUD][ERR] Cycle {self.cycle} timed out")
            return self.fail(self.cycle, "timed out")

        if self.phase is SavePhase.RESULT and self._reset_at is not None and t >= self._reset_at:
            self._reset_at = None
            self.phase = SavePhase.IDLE
            self.message = HUD_DEFAULT_MESSAGE
            self.visible = False
            log(f"[HUD] Cycle {self.cycle} hidden")
            return True

        return False
