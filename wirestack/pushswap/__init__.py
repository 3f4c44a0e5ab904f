"""Two-stack sorting solver and checker."""

__version__ = "0.1.0"