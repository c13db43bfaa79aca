"""Theme tints and the wording used for captions and option lists."""

from __future__ import annotations

from app.models.requests import Palette, RoomCategory, Theme

# (r, g, b, alpha) full-surface overlay per theme
THEME_TINTS: dict[Theme, tuple[int, int, int, float]] = {
    Theme.MODERN: (56, 189, 248, 0.15),
    Theme.MINIMAL: (148, 163, 184, 0.18),
    Theme.RUSTIC: (234, 179, 8, 0.18),
    Theme.LUXURY: (217, 70, 239, 0.15),
    Theme.INDUSTRIAL: (163, 230, 53, 0.15),
}
DEFAULT_THEME = Theme.INDUSTRIAL

PALETTE_LABELS: dict[Palette, str] = {
    Palette.NEUTRAL: "neutral palette",
    Palette.WARM: "warm palette",
    Palette.COOL: "cool palette",
    Palette.BOLD: "bold accents",
    Palette.EARTHY: "earthy tones",
}
DEFAULT_PALETTE_LABEL = "earthy tones"

ROOM_LABELS: dict[RoomCategory, str] = {
    RoomCategory.LIVING_ROOM: "living room",
    RoomCategory.BEDROOM: "bedroom",
    RoomCategory.KITCHEN: "kitchen",
    RoomCategory.OFFICE: "workspace",
    RoomCategory.OTHER: "space",
}
DEFAULT_ROOM_LABEL = "space"

# Select-box labels
ROOM_DISPLAY_NAMES: dict[RoomCategory, str] = {
    RoomCategory.LIVING_ROOM: "Living Room",
    RoomCategory.BEDROOM: "Bedroom",
    RoomCategory.KITCHEN: "Kitchen",
    RoomCategory.OFFICE: "Office / Workspace",
    RoomCategory.OTHER: "Other / Empty Plot",
}
THEME_DISPLAY_NAMES: dict[Theme, str] = {t: t.value.capitalize() for t in Theme}
PALETTE_DISPLAY_NAMES: dict[Palette, str] = {p: p.value.capitalize() for p in Palette}


def tint_for(theme: Theme | str) -> tuple[int, int, int, float]:
    try:
        return THEME_TINTS[Theme(theme)]
    except ValueError:
        return THEME_TINTS[DEFAULT_THEME]


def palette_label(palette: Palette | str) -> str:
    try:
        return PALETTE_LABELS[Palette(palette)]
    except ValueError:
        return DEFAULT_PALETTE_LABEL


def room_label(category: RoomCategory | str) -> str:
    try:
        return ROOM_LABELS[RoomCategory(category)]
    except ValueError:
        return DEFAULT_ROOM_LABEL
