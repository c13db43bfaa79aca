"""Tests for the room layout catalog and S1.01 annotation."""

import numpy as np
import pytest

from app.engine.catalog import FALLBACK_LAYOUT, ROOM_LAYOUTS, LabelBlock, layout_for
from app.engine.compose.s1_01_layout_annotator import annotate_layout, place_blocks
from app.models.requests import RoomCategory
from tests.conftest import solid


class TestCatalog:
    def test_every_category_has_blocks(self):
        for category in RoomCategory:
            assert layout_for(category)

    @pytest.mark.parametrize(
        "category, labels",
        [
            (RoomCategory.LIVING_ROOM, ["Sofa", "TV", "Table"]),
            (RoomCategory.BEDROOM, ["Bed", "Wardrobe"]),
            (RoomCategory.KITCHEN, ["Counter", "Fridge"]),
            (RoomCategory.OFFICE, ["Desk", "Desk", "Cabinet"]),
            (RoomCategory.OTHER, ["Feature"]),
        ],
    )
    def test_labels_in_order(self, category, labels):
        assert [b.text for b in layout_for(category)] == labels

    def test_living_room_fractions(self):
        sofa, tv, table = ROOM_LAYOUTS[RoomCategory.LIVING_ROOM]
        assert (sofa.x_frac, sofa.y_frac, sofa.w_frac, sofa.h_frac) == (0.15, 0.65, 0.35, 0.15)
        assert (tv.x_frac, tv.y_frac, tv.w_frac, tv.h_frac) == (0.55, 0.70, 0.18, 0.10)
        assert (table.x_frac, table.y_frac, table.w_frac, table.h_frac) == (0.32, 0.58, 0.16, 0.08)

    def test_unknown_category_falls_back(self):
        assert layout_for("garage") == FALLBACK_LAYOUT
        assert FALLBACK_LAYOUT[0] == LabelBlock(0.20, 0.65, 0.25, 0.15, "Feature")

    def test_all_fractions_in_unit_square(self):
        for blocks in ROOM_LAYOUTS.values():
            for b in blocks:
                assert 0 <= b.x_frac and b.x_frac + b.w_frac <= 1
                assert 0 <= b.y_frac and b.y_frac + b.h_frac <= 1


class TestPlacement:
    def test_kitchen_at_1000(self):
        blocks = place_blocks(RoomCategory.KITCHEN, 1000, 1000)
        assert [(b.text, b.box) for b in blocks] == [
            ("Counter", (150, 620, 500, 120)),
            ("Fridge", (700, 650, 150, 100)),
        ]

    def test_rounding_is_half_up(self):
        # 0.5 -> 1 and 1.5 -> 2, not banker's rounding
        block = LabelBlock(0.25, 0.25, 0.5, 0.5, "x")
        assert block.to_pixels(2, 6) == (1, 2, 1, 3)

    @pytest.mark.parametrize("size", [(1, 1), (7, 3), (333, 999), (1024, 683)])
    def test_boxes_stay_inside_surface(self, size):
        w, h = size
        for category in RoomCategory:
            for block in place_blocks(category, w, h):
                x, y, bw, bh = block.box
                assert 0 <= x and x + bw <= w
                assert 0 <= y and y + bh <= h


class TestAnnotate:
    def test_returns_same_surface(self):
        surface = solid(100, 100)
        assert annotate_layout(surface, RoomCategory.OTHER) is surface

    def test_block_darkens_at_35_percent(self):
        surface = annotate_layout(solid(400, 400), RoomCategory.LIVING_ROOM)
        # Inside Sofa (60, 260, 140, 60), clear of label text and guideline
        r, g, b, a = surface.getpixel((197, 317))
        assert abs(r - 166) <= 2
        assert r == g == b
        assert a == 255

    def test_outside_blocks_untouched(self):
        surface = annotate_layout(solid(400, 400), RoomCategory.LIVING_ROOM)
        assert surface.getpixel((5, 5)) == (255, 255, 255, 255)
        assert surface.getpixel((395, 100)) == (255, 255, 255, 255)

    def test_guideline_drawn_from_lower_left(self):
        surface = annotate_layout(solid(400, 400, (0, 0, 0, 255)), RoomCategory.LIVING_ROOM)
        window = np.asarray(surface)[352:364, 36:48, 0]
        assert window.max() >= 100

    def test_labels_drawn_in_white(self):
        surface = annotate_layout(solid(400, 400, (0, 0, 0, 255)), RoomCategory.LIVING_ROOM)
        # "Sofa" sits on the baseline at (68, 280)
        region = np.asarray(surface)[264:282, 66:120, 0]
        assert region.max() > 200
