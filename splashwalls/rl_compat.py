"""Raylib compatibility layer - abstracts differences between raylibpy and python-raylib."""

from __future__ import annotations
from typing import Any, Tuple

try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except Exception:
    import raylib as rl
    RL_VERSION = "python-raylib"


def make_color(r: int, g: int, b: int, a: int) -> Any:
    """Create a raylib Color compatible with the current binding."""
    ctor = getattr(rl, "Color", None)
    if ctor:
        try:
            return ctor(int(r), int(g), int(b), int(a))
        except Exception:
            pass
    # python-raylib accepts plain tuples for Color arguments
    return (int(r), int(g), int(b), int(a))


def init_window(width: int, height: int, title: str) -> None:
    """Open the window with encoding fallback."""
    try:
        rl.InitWindow(width, height, title)
    except TypeError:
        rl.InitWindow(width, height, title.encode('utf-8'))


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    """Draw text with encoding fallback."""
    try:
        rl.DrawText(text, x, y, size, color)
    except TypeError:
        rl.DrawText(text.encode('utf-8'), x, y, size, color)


def measure_text(text: str, size: int) -> int:
    """Measure text width with encoding fallback."""
    try:
        return rl.MeasureText(text, size)
    except TypeError:
        return rl.MeasureText(text.encode('utf-8'), size)


def mouse_position() -> Tuple[float, float]:
    pos = rl.GetMousePosition()
    return (float(pos.x), float(pos.y))


__all__ = [
    'rl',
    'RL_VERSION',
    'make_color',
    'init_window',
    'draw_text',
    'measure_text',
    'mouse_position',
]
