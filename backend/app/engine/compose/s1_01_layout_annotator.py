"""S1.01 — Layout annotator.

Dashed sight-line guideline first, then one translucent dark block per
catalog entry with its label in white.
"""

from __future__ import annotations

from PIL import Image, ImageDraw

from app.engine.catalog import layout_for
from app.engine.config import RenderConfig
from app.engine.context import PlacedBlock, RenderContext
from app.engine.registry import Phase, stage
from app.models.requests import RoomCategory
from app.utils.drawing import draw_dashed_polyline
from app.utils.fonts import load_font
from app.utils.imaging import blank_layer, rgba

_WHITE = (255, 255, 255, 255)


def place_blocks(category: RoomCategory | str, width: int, height: int) -> list[PlacedBlock]:
    return [PlacedBlock(text=b.text, box=b.to_pixels(width, height)) for b in layout_for(category)]


def draw_guideline(surface: Image.Image, config: RenderConfig) -> None:
    w, h = surface.size
    layer = blank_layer(surface.size)
    points = [(fx * w, fy * h) for fx, fy in config.guideline_points]
    draw_dashed_polyline(
        ImageDraw.Draw(layer),
        points,
        config.guideline_dash,
        fill=rgba(255, 255, 255, config.guideline_alpha),
        width=config.guideline_width,
    )
    surface.alpha_composite(layer)


def annotate_layout(
    surface: Image.Image,
    category: RoomCategory | str,
    config: RenderConfig | None = None,
) -> Image.Image:
    """Draw guideline and label blocks in place; returns the same surface."""
    config = config or RenderConfig()
    draw_guideline(surface, config)

    blocks = place_blocks(category, surface.width, surface.height)

    fills = blank_layer(surface.size)
    fill_draw = ImageDraw.Draw(fills)
    for block in blocks:
        x, y, bw, bh = block.box
        if bw > 0 and bh > 0:
            fill_draw.rectangle((x, y, x + bw - 1, y + bh - 1), fill=rgba(0, 0, 0, config.block_alpha))
    surface.alpha_composite(fills)

    # Labels go on their own layer so glyph edges blend over the fills
    font = load_font(config.label_font_size, config.font_candidates)
    labels = blank_layer(surface.size)
    label_draw = ImageDraw.Draw(labels)
    dx, dy = config.label_inset
    for block in blocks:
        x, y, _, _ = block.box
        label_draw.text((x + dx, y + dy), block.text, font=font, fill=_WHITE, anchor="ls")
    surface.alpha_composite(labels)

    return surface


@stage(
    id="S1.01",
    phase=Phase.COMPOSITE,
    dependencies=["S0.01"],
    description="Draw sight-line guideline and furniture label blocks",
)
def layout_annotator(ctx: RenderContext) -> None:
    surface = ctx.require_surface()
    category = ctx.request.room_category
    ctx.placed_blocks = place_blocks(category, surface.width, surface.height)
    annotate_layout(surface, category, ctx.config)
