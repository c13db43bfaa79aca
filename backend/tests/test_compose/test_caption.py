"""Tests for S1.03 caption text, geometry and drawing."""

import numpy as np
import pytest

from app.engine.compose.s1_03_caption import build_caption, caption_box, draw_caption, format_inr
from app.engine.config import RenderConfig
from app.models.requests import GenerationRequest, Palette, RoomCategory, Theme
from app.utils.fonts import load_font, text_width
from tests.conftest import LONG_NOTES, solid


@pytest.mark.parametrize(
    "amount, expected",
    [
        (300000, "₹3,00,000"),
        (0, "₹0"),
        (999, "₹999"),
        (1000, "₹1,000"),
        (99999, "₹99,999"),
        (1234567, "₹12,34,567"),
        (1234567.5, "₹12,34,568"),
        (100000000, "₹10,00,00,000"),
    ],
)
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected


def test_default_caption(default_request):
    assert build_caption(default_request) == "Modern neutral palette living room • ₹3,00,000 • AI layout v1"


def test_caption_wording():
    req = GenerationRequest(
        room_category=RoomCategory.OFFICE,
        theme=Theme.LUXURY,
        palette=Palette.BOLD,
        budget=75000,
        notes="standing desk",
    )
    assert build_caption(req) == "Luxury bold accents workspace • ₹75,000 • standing desk"


def test_notes_truncated_to_60():
    caption = build_caption(GenerationRequest(notes=LONG_NOTES))
    assert caption.endswith(" • " + LONG_NOTES[:60])
    assert LONG_NOTES[60:] not in caption


def test_box_geometry():
    cfg = RenderConfig()
    box = caption_box(200.0, 1024, 768, cfg)
    assert box.width == 232.0
    assert box.height == 36
    assert box.x == 1024 - 232 - 16
    assert box.y == 768 - 36 - 16


def test_box_width_tracks_truncated_text():
    cfg = RenderConfig()
    font = load_font(cfg.caption_font_size, cfg.font_candidates)
    text = build_caption(GenerationRequest(notes=LONG_NOTES), cfg)
    box = draw_caption(solid(1024, 768), text, cfg)
    assert box.width == pytest.approx(text_width(text, font) + 32)
    full = text.replace(LONG_NOTES[:60], LONG_NOTES)
    assert box.width < text_width(full, font) + 32


def test_draw_caption_darkens_bottom_right():
    surface = solid(800, 600)
    box = draw_caption(surface, "Modern neutral palette living room • ₹3,00,000 • AI layout v1")
    pixels = np.asarray(surface)
    # Inside the pill but left of the text run
    inside = pixels[int(box.y + 4), int(box.x + 6), :3]
    assert inside.max() < 200
    # Top-left corner is far from the pill
    assert tuple(pixels[10, 10]) == (255, 255, 255, 255)
