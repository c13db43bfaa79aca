"""S1.02 — Theme tint.

Full-surface translucent colour per theme, composited source-over on top of
the annotations.
"""

from __future__ import annotations

from PIL import Image

from app.engine.context import RenderContext
from app.engine.registry import Phase, stage
from app.engine.styles import tint_for
from app.models.requests import Theme
from app.utils.imaging import rgba


def apply_tint(surface: Image.Image, theme: Theme | str) -> Image.Image:
    r, g, b, alpha = tint_for(theme)
    surface.alpha_composite(Image.new("RGBA", surface.size, rgba(r, g, b, alpha)))
    return surface


@stage(
    id="S1.02",
    phase=Phase.COMPOSITE,
    dependencies=["S1.01"],
    description="Overlay the theme tint",
)
def theme_tint(ctx: RenderContext) -> None:
    apply_tint(ctx.require_surface(), ctx.request.theme)
