"""Font loading with a process-wide cache (fonts are read-only once loaded)."""

from __future__ import annotations

import logging
from functools import lru_cache

from PIL import ImageFont

logger = logging.getLogger(__name__)


@lru_cache(maxsize=16)
def load_font(size: int, candidates: tuple[str, ...]) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """First TrueType candidate that loads, else Pillow's bundled font at ``size``."""
    for cand in candidates:
        try:
            return ImageFont.truetype(cand, size)
        except OSError:
            continue
    logger.info("No TrueType font among %d candidates; using bundled font at %dpx", len(candidates), size)
    return ImageFont.load_default(size=size)


def text_width(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> float:
    """Advance width of ``text`` in pixels."""
    return float(font.getlength(text))
