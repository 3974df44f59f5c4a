"""SplashWalls - random Unsplash wallpapers with double-tap to save."""

__version__ = "0.1.0"
