"""State model for a terminal music player: library items, caches, playback, pages and popups."""

__version__ = "0.1.0"