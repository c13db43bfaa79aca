"""S2.02 — Edge-glow variant.

Re-decodes the base composite, estimates edges with a 3x3 Sobel pair over
luma and soft-light blends the magnitude map back into the photo. The
1-pixel frame has no edge value and therefore takes the b = 0 branch of the
blend (a^2), a known boundary artifact.
"""

from __future__ import annotations

import numpy as np
from PIL import Image

from app.engine.codec import decode_image, encode_png
from app.engine.context import RenderContext
from app.engine.registry import Phase, stage
from app.utils.edges import apply_edge_glow


def edge_glow_image(img: Image.Image) -> Image.Image:
    pixels = np.asarray(img.convert("RGBA"))
    return Image.fromarray(apply_edge_glow(pixels))


def edge_glow_variant(base_png: bytes) -> bytes:
    return encode_png(edge_glow_image(decode_image(base_png)))


@stage(
    id="S2.02",
    phase=Phase.DERIVATIVE,
    dependencies=["S1.03"],
    description="Sobel edge map soft-light blended over the base composite",
)
def edge_glow_processor(ctx: RenderContext) -> None:
    ctx.edge_glow_png = edge_glow_variant(ctx.require_base())
