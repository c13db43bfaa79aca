"""Small raster helpers shared by the drawing stages."""

from __future__ import annotations

import math

from PIL import Image


def round_half_up(value: float) -> int:
    """Round .5 upward, unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def rgba(r: int, g: int, b: int, alpha: float) -> tuple[int, int, int, int]:
    """Colour with a fractional alpha mapped onto 0-255."""
    return (r, g, b, round_half_up(alpha * 255))


def blank_layer(size: tuple[int, int]) -> Image.Image:
    """Fully transparent overlay to draw on before compositing source-over."""
    return Image.new("RGBA", size, (0, 0, 0, 0))
