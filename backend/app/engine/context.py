"""RenderContext: the per-call state object flowing through all stages.

One context per generation call. The render surface lives only here, so
concurrent calls never share a mutable canvas.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image

from app.engine.config import RenderConfig
from app.models.requests import GenerationRequest

VARIANT_COUNT = 3


@dataclass(frozen=True)
class PlacedBlock:
    """A label block resolved to pixels on the current surface."""

    text: str
    # (x, y, w, h)
    box: tuple[int, int, int, int]


@dataclass(frozen=True)
class CaptionBox:
    """Caption pill geometry in surface pixels."""

    x: float
    y: float
    width: float
    height: float
    text_width: float


@dataclass
class RenderContext:
    """Shared state for one run of the variant pipeline."""

    request: GenerationRequest
    # Decoded source photo, read-only
    source: Image.Image
    config: RenderConfig = field(default_factory=RenderConfig)

    # --- Composite phase ---
    surface: Image.Image | None = None
    placed_blocks: list[PlacedBlock] = field(default_factory=list)
    caption: str = ""
    caption_box: CaptionBox | None = None

    # --- Encoded variants ---
    base_png: bytes | None = None
    toned_png: bytes | None = None
    edge_glow_png: bytes | None = None

    # --- Pipeline metadata ---
    completed_stages: list[str] = field(default_factory=list)
    timings_ms: dict[str, float] = field(default_factory=dict)

    def require_surface(self) -> Image.Image:
        if self.surface is None:
            raise RuntimeError("Render surface not built yet (surface stage has not run)")
        return self.surface

    def require_base(self) -> bytes:
        if self.base_png is None:
            raise RuntimeError("Base composite not encoded yet")
        return self.base_png

    @property
    def variants(self) -> list[bytes]:
        """Ordered output: [base, toned, edge_glow]."""
        out = [v for v in (self.base_png, self.toned_png, self.edge_glow_png) if v is not None]
        if len(out) != VARIANT_COUNT:
            raise RuntimeError(f"Pipeline produced {len(out)} of {VARIANT_COUNT} variants")
        return out
