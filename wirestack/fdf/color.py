"""Packing, shading and blending of 24-bit RGB colours."""

from __future__ import annotations

import math


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


def _clamp_channel(value: int) -> int:
    return max(0, min(255, value))


def create_rgb(r: int, g: int, b: int) -> int:
    """Pack three channels into ``0xRRGGBB``."""
    return r << 16 | g << 8 | b


def get_r(rgb: int) -> int:
    """Red channel of ``rgb``."""
    return (rgb >> 16) & 0xFF


def get_g(rgb: int) -> int:
    """Green channel of ``rgb``."""
    return (rgb >> 8) & 0xFF


def get_b(rgb: int) -> int:
    """Blue channel of ``rgb``."""
    return rgb & 0xFF


def add_shade(rgb: int, shade_factor: float) -> int:
    """Scale every channel by ``shade_factor``, clamped to ``0..255``."""
    r = _clamp_channel(int(get_r(rgb) * shade_factor))
    g = _clamp_channel(int(get_g(rgb) * shade_factor))
    b = _clamp_channel(int(get_b(rgb) * shade_factor))
    return create_rgb(r, g, b)


def get_opposite(rgb: int) -> int:
    """The complementary colour: every channel replaced by ``255 - channel``."""
    return create_rgb(255 - get_r(rgb), 255 - get_g(rgb), 255 - get_b(rgb))


def interpolate_color(c_start: int, c_end: int, t: float) -> int:
    """Linear blend from ``c_start`` (``t = 0``) to ``c_end`` (``t = 1``)."""
    channels = (
        _clamp_channel(_round_half_away((1.0 - t) * get(c_start) + t * get(c_end)))
        for get in (get_r, get_g, get_b)
    )
    return create_rgb(*channels)