"""Application - main loop orchestrator.

Each frame: poll input into commands, execute them against the screen,
draw the text overlay, then update the screen (save completions, HUD
timers, pending reload).
"""

from __future__ import annotations
import argparse
import traceback
from typing import List, Optional

from .commands import Command, CloseApp
from .config import (
    TARGET_FPS, WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE,
    CAMERA_ROLL_DIR, NUM_WALLPAPERS,
    FONT_SIZE, LABEL_FONT_SIZE, AUTHOR_FONT_SIZE,
)
from .feed import photo_url
from .input_handler import InputHandler, get_input_handler
from .logging import log, increment_frame
from .rl_compat import rl, RL_VERSION, make_color, init_window, draw_text, measure_text
from .saver import AsyncSaveWorker, PhotoSaver
from .screen import WallpaperScreen


class Application:
    """Owns the window, the screen controller and the save worker."""

    def __init__(self, screen: WallpaperScreen,
                 input_handler: Optional[InputHandler] = None):
        self.screen = screen
        self.input_handler = input_handler or get_input_handler()
        self.running = False

    def run(self) -> None:
        init_window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        rl.SetTargetFPS(TARGET_FPS)
        rl.SetExitKey(0)  # Escape goes through CloseApp

        self.screen.request_reload()
        self.running = True
        log(f"[APP] Starting main loop ({RL_VERSION})")

        try:
            while self.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
        finally:
            self._cleanup()

    def _frame(self) -> None:
        if rl.WindowShouldClose():
            self.running = False
            return

        commands: List[Command] = self.input_handler.poll(self.screen)
        for cmd in commands:
            if isinstance(cmd, CloseApp):
                cmd.execute(self.screen)
                self.running = False
                return
            cmd.execute(self.screen)

        # Drawing first lets the loading message show before a blocking reload
        self._draw()
        self.screen.update()
        increment_frame()

    def _draw(self) -> None:
        state = self.screen.state
        white = make_color(255, 255, 255, 255)
        label_bg = make_color(0, 0, 0, 204)
        w = rl.GetScreenWidth()
        h = rl.GetScreenHeight()

        rl.BeginDrawing()
        rl.ClearBackground(make_color(0, 0, 0, 255))

        if state.is_loading:
            text = "Contacting Unsplash"
            draw_text(text, (w - measure_text(text, FONT_SIZE)) // 2, h // 2, FONT_SIZE, white)
        else:
            photo = state.current_photo
            if photo is not None:
                rl.DrawRectangle(20, 20, w // 2, 20 + AUTHOR_FONT_SIZE + 4, label_bg)
                draw_text("Photo by", 25, 22, LABEL_FONT_SIZE, white)
                draw_text(photo.author, 25, 41, AUTHOR_FONT_SIZE, white)
                draw_text(photo_url(photo), 20, h - 60, LABEL_FONT_SIZE, white)
            pos = f"{state.carousel.current() + 1} / {state.count}"
            draw_text(pos, (w - measure_text(pos, FONT_SIZE)) // 2, h - 35, FONT_SIZE, white)

        hud = state.hud
        if hud.visible:
            tw = measure_text(hud.message, FONT_SIZE)
            bw, bh = tw + 40, FONT_SIZE + 30
            bx, by = (w - bw) // 2, (h - bh) // 2
            rl.DrawRectangle(bx, by, bw, bh, label_bg)
            draw_text(hud.message, bx + 20, by + 15, FONT_SIZE, white)

        rl.EndDrawing()

    def _cleanup(self) -> None:
        log("[APP] Cleanup")
        shutdown = getattr(self.screen.worker, "shutdown", None)
        if shutdown is not None:
            shutdown()
        rl.CloseWindow()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="splashwalls",
                                     description="Random Unsplash wallpapers; double-click to save.")
    parser.add_argument("--camera-roll", default=CAMERA_ROLL_DIR,
                        help="directory saved wallpapers are written to")
    parser.add_argument("--count", type=int, default=NUM_WALLPAPERS,
                        help="number of wallpapers to show")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    log("[MAIN] Starting application")

    worker = AsyncSaveWorker(PhotoSaver(target_dir=args.camera_roll).save)
    screen = WallpaperScreen(worker, wallpaper_count=args.count)
    Application(screen).run()
