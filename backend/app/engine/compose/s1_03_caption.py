"""S1.03 — Caption pill.

"{Theme} {palette} {room} • {budget} • {notes}" on a rounded translucent
backdrop anchored 16px from the bottom-right corner. Last step before the
base composite is encoded.
"""

from __future__ import annotations

from PIL import Image, ImageDraw

from app.engine.config import RenderConfig
from app.engine.context import CaptionBox, RenderContext
from app.engine.registry import Phase, stage
from app.engine.styles import palette_label, room_label
from app.models.requests import GenerationRequest
from app.utils.fonts import load_font, text_width
from app.utils.imaging import blank_layer, rgba, round_half_up

_RUPEE = "₹"
_SEPARATOR = " • "


def format_inr(amount: float) -> str:
    """Indian-grouped rupees, no decimals: 300000 -> '₹3,00,000'."""
    value = round_half_up(abs(float(amount)))
    sign = "-" if amount < 0 and value else ""
    digits = str(value)
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups: list[str] = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])
    return f"{sign}{_RUPEE}{digits}"


def caption_notes(notes: str, config: RenderConfig) -> str:
    return notes[: config.notes_limit] or config.default_notes


def build_caption(request: GenerationRequest, config: RenderConfig | None = None) -> str:
    config = config or RenderConfig()
    theme = request.theme.value
    head = f"{theme[:1].upper()}{theme[1:]} {palette_label(request.palette)} {room_label(request.room_category)}"
    return _SEPARATOR.join([head, format_inr(request.budget), caption_notes(request.notes, config)])


def caption_box(measured_width: float, width: int, height: int, config: RenderConfig) -> CaptionBox:
    box_w = measured_width + 2 * config.caption_padding_x
    box_h = config.caption_height
    return CaptionBox(
        x=width - box_w - config.caption_margin,
        y=height - box_h - config.caption_margin,
        width=box_w,
        height=box_h,
        text_width=measured_width,
    )


def draw_caption(surface: Image.Image, text: str, config: RenderConfig | None = None) -> CaptionBox:
    """Draw the caption pill in place and return its geometry."""
    config = config or RenderConfig()
    font = load_font(config.caption_font_size, config.font_candidates)
    box = caption_box(text_width(text, font), surface.width, surface.height, config)
    rect = tuple(round_half_up(v) for v in (box.x, box.y, box.x + box.width, box.y + box.height))

    backdrop = blank_layer(surface.size)
    ImageDraw.Draw(backdrop).rounded_rectangle(
        rect,
        radius=config.caption_radius,
        fill=rgba(0, 0, 0, config.caption_fill_alpha),
        outline=rgba(255, 255, 255, config.caption_border_alpha),
        width=1,
    )
    surface.alpha_composite(backdrop)

    label = blank_layer(surface.size)
    ImageDraw.Draw(label).text(
        (box.x + config.caption_padding_x, box.y + box.height / 2),
        text,
        font=font,
        fill=(255, 255, 255, 255),
        anchor="lm",
    )
    surface.alpha_composite(label)
    return box


@stage(
    id="S1.03",
    phase=Phase.COMPOSITE,
    dependencies=["S1.02"],
    description="Render the summary caption pill",
)
def caption_renderer(ctx: RenderContext) -> None:
    ctx.caption = build_caption(ctx.request, ctx.config)
    ctx.caption_box = draw_caption(ctx.require_surface(), ctx.caption, ctx.config)
