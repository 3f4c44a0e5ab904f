"""Two-stack sorting tools and helpers for height-map values and colours."""

__version__ = "0.1.0"