"""Shared test fixtures."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image, ImageDraw

from app.engine.pipeline import load_stages
from app.models.requests import GenerationRequest, Palette, RoomCategory, Theme

# Register every stage once for the whole session
load_stages()

ALL_STAGE_IDS = ["S0.01", "S1.01", "S1.02", "S1.03", "S2.01", "S2.02"]

LONG_NOTES = (
    "maximize natural light, add bookshelves along the north wall, "
    "minimalist decor with warm oak accents"
)


def make_photo(width: int = 640, height: int = 480) -> Image.Image:
    """Deterministic stand-in for a room photo: colour ramps plus a dark box."""
    xs = np.linspace(0, 255, width)
    ys = np.linspace(0, 255, height)
    r = np.tile(xs, (height, 1))
    g = np.tile(ys[:, None], (1, width))
    b = (r + g) / 2
    img = Image.fromarray(np.stack([r, g, b], axis=-1).astype(np.uint8))
    ImageDraw.Draw(img).rectangle(
        (width // 4, height // 4, width // 2, height // 2),
        fill=(20, 20, 20),
    )
    return img


def solid(width: int, height: int, color: tuple[int, ...] = (255, 255, 255, 255)) -> Image.Image:
    return Image.new("RGBA", (width, height), color)


def to_bytes(img: Image.Image, fmt: str = "PNG", **kwargs) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format=fmt, **kwargs)
    return buf.getvalue()


def decode(png: bytes) -> Image.Image:
    return Image.open(io.BytesIO(png)).convert("RGBA")


@pytest.fixture
def room_photo() -> Image.Image:
    return make_photo()


@pytest.fixture
def room_png(room_photo) -> bytes:
    return to_bytes(room_photo)


@pytest.fixture
def default_request() -> GenerationRequest:
    return GenerationRequest()


@pytest.fixture
def kitchen_request() -> GenerationRequest:
    return GenerationRequest(
        room_category=RoomCategory.KITCHEN,
        theme=Theme.RUSTIC,
        palette=Palette.WARM,
        budget=450000,
        notes="open shelving",
    )
