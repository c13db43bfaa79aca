"""Room layout catalog: room category -> ordered label-block placements.

Fractions are hand-tuned against the frame and resolved to pixels at draw
time, so layouts scale with any input resolution.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.models.requests import RoomCategory
from app.utils.imaging import round_half_up


@dataclass(frozen=True)
class LabelBlock:
    """Normalized rectangle (all fractions in [0, 1]) with a caption."""

    x_frac: float
    y_frac: float
    w_frac: float
    h_frac: float
    text: str

    def to_pixels(self, width: int, height: int) -> tuple[int, int, int, int]:
        """(x, y, w, h) in pixels, kept inside a width x height surface."""
        x = min(max(round_half_up(self.x_frac * width), 0), width)
        y = min(max(round_half_up(self.y_frac * height), 0), height)
        w = min(max(round_half_up(self.w_frac * width), 0), width - x)
        h = min(max(round_half_up(self.h_frac * height), 0), height - y)
        return (x, y, w, h)


FALLBACK_LAYOUT: tuple[LabelBlock, ...] = (LabelBlock(0.20, 0.65, 0.25, 0.15, "Feature"),)

ROOM_LAYOUTS: dict[RoomCategory, tuple[LabelBlock, ...]] = {
    RoomCategory.LIVING_ROOM: (
        LabelBlock(0.15, 0.65, 0.35, 0.15, "Sofa"),
        LabelBlock(0.55, 0.70, 0.18, 0.10, "TV"),
        LabelBlock(0.32, 0.58, 0.16, 0.08, "Table"),
    ),
    RoomCategory.BEDROOM: (
        LabelBlock(0.20, 0.60, 0.38, 0.18, "Bed"),
        LabelBlock(0.62, 0.62, 0.16, 0.12, "Wardrobe"),
    ),
    RoomCategory.KITCHEN: (
        LabelBlock(0.15, 0.62, 0.50, 0.12, "Counter"),
        LabelBlock(0.70, 0.65, 0.15, 0.10, "Fridge"),
    ),
    RoomCategory.OFFICE: (
        LabelBlock(0.20, 0.65, 0.20, 0.12, "Desk"),
        LabelBlock(0.45, 0.65, 0.20, 0.12, "Desk"),
        LabelBlock(0.70, 0.65, 0.12, 0.12, "Cabinet"),
    ),
    RoomCategory.OTHER: FALLBACK_LAYOUT,
}


def layout_for(category: RoomCategory | str) -> tuple[LabelBlock, ...]:
    """Blocks for a category; anything unrecognised gets the generic "Feature" block."""
    try:
        key = RoomCategory(category)
    except ValueError:
        return FALLBACK_LAYOUT
    return ROOM_LAYOUTS.get(key, FALLBACK_LAYOUT)
