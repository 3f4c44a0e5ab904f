"""Number, word and colour helpers for height-map data."""

__version__ = "0.1.0"