"""S0.01 — Surface scaler.

W = min(1024, Wn), H = round(Hn * W / Wn). The source is resampled into a
fresh surface; the decoded photo itself is never modified.
"""

from __future__ import annotations

from PIL import Image

from app.engine.context import RenderContext
from app.engine.errors import DecodeError
from app.engine.registry import Phase, stage
from app.utils.imaging import round_half_up


def target_size(width: int, height: int, max_width: int = 1024) -> tuple[int, int]:
    """Cap the width at ``max_width`` with a uniform scale factor."""
    if width <= 0 or height <= 0:
        raise DecodeError(f"Could not decode image: zero dimensions {width}x{height}")
    w = min(max_width, width)
    scale = w / width
    # Extremely wide strips would otherwise round to zero rows
    h = max(1, round_half_up(height * scale))
    return w, h


def scale_to_surface(source: Image.Image, max_width: int = 1024) -> Image.Image:
    """Fresh RGBA surface of the target size with the source drawn into it."""
    size = target_size(source.width, source.height, max_width)
    rgba = source if source.mode == "RGBA" else source.convert("RGBA")
    if size == rgba.size:
        return rgba.copy()
    return rgba.resize(size, Image.Resampling.LANCZOS)


@stage(
    id="S0.01",
    phase=Phase.SURFACE,
    description="Scale the source photo onto a fresh render surface",
)
def surface_scaler(ctx: RenderContext) -> None:
    ctx.surface = scale_to_surface(ctx.source, ctx.config.max_width)
