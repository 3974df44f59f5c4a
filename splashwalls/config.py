"""Application configuration constants."""

from __future__ import annotations

import os

# Performance
TARGET_FPS = 60
SAVE_WORKERS = 2

# Window
WINDOW_WIDTH = 540
WINDOW_HEIGHT = 960
WINDOW_TITLE = "SplashWalls"

# Feed
FEED_URL = "https://unsplash.it/list"
PHOTO_URL_TEMPLATE = "https://unsplash.it/{width}/{height}?image={id}"
HTTP_TIMEOUT_S = 15.0
NUM_WALLPAPERS = 10

# Gestures
DOUBLE_TAP_DELAY_MS = 300   # max gap between touch-downs
DOUBLE_TAP_RADIUS = 20      # max distance between touch-downs, in pixels

# Save HUD
HUD_DEFAULT_MESSAGE = "Saving..."
HUD_SUCCESS_MESSAGE = "Saved to Camera Roll"
HUD_SUCCESS_HIDE_MS = 500
HUD_FAILURE_HIDE_MS = 900
SAVE_TIMEOUT_MS = 20000     # Active cycle is forced to a failure after this

# Persistence
CAMERA_ROLL_DIR = os.path.join(os.path.expanduser("~"), "Pictures", "SplashWalls")
SAVE_JPEG_QUALITY = 95

# Font settings
FONT_SIZE = 20
LABEL_FONT_SIZE = 13
AUTHOR_FONT_SIZE = 15

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_NEXT_WALL = 262         # KEY_RIGHT
KEY_PREV_WALL = 263         # KEY_LEFT
KEY_RELOAD = 82             # KEY_R
KEY_SAVE = 83               # KEY_S
KEY_CLOSE = 256             # KEY_ESCAPE
