"""S2.01 — Toned variant.

Re-decodes the finished base composite, darkens the corners with a radial
vignette, then applies a gentle linear contrast boost (c = 1.08).
"""

from __future__ import annotations

import numpy as np
from PIL import Image

from app.engine.codec import decode_image, encode_png
from app.engine.config import ToneParameters
from app.engine.context import RenderContext
from app.engine.registry import Phase, stage
from app.utils.tone import apply_contrast, vignette_layer


def tone_image(img: Image.Image, params: ToneParameters | None = None) -> Image.Image:
    """Vignette then contrast; ``img`` is left untouched."""
    params = params or ToneParameters()
    work = img.convert("RGBA") if img.mode != "RGBA" else img.copy()
    overlay = vignette_layer(
        work.width,
        work.height,
        params.inner_radius_frac,
        params.outer_radius_frac,
        params.vignette_alpha,
    )
    work.alpha_composite(Image.fromarray(overlay))
    pixels = apply_contrast(np.asarray(work), params.contrast_factor)
    return Image.fromarray(pixels)


def tone_variant(base_png: bytes, params: ToneParameters | None = None) -> bytes:
    return encode_png(tone_image(decode_image(base_png), params))


@stage(
    id="S2.01",
    phase=Phase.DERIVATIVE,
    dependencies=["S1.03"],
    description="Vignette + contrast variant of the base composite",
)
def tone_processor(ctx: RenderContext) -> None:
    ctx.toned_png = tone_variant(ctx.require_base(), ctx.config.tone)
