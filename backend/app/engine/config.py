"""Render configuration: fixed engine constants for the compositor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ToneParameters:
    """Vignette geometry and contrast strength for the toned variant."""

    inner_radius_frac: float = 0.2  # of min(W, H), fully transparent inside
    outer_radius_frac: float = 0.7  # of max(W, H), full vignette alpha beyond
    vignette_alpha: float = 0.35
    contrast_factor: float = 1.08


@dataclass
class RenderConfig:
    """Controls surface size, typography and overlay geometry."""

    # Long-edge cap applied to the surface width
    max_width: int = 1024

    # Typography (bold sans-serif); first loadable candidate wins
    label_font_size: int = 14
    caption_font_size: int = 16
    font_candidates: tuple[str, ...] = (
        "DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "Arial Bold.ttf",
        "arialbd.ttf",
    )

    # Label blocks
    block_alpha: float = 0.35
    label_inset: tuple[int, int] = (8, 20)  # right, down to the text baseline

    # Sight-line guideline
    guideline_points: tuple[tuple[float, float], ...] = ((0.1, 0.9), (0.5, 0.6), (0.9, 0.9))
    guideline_dash: tuple[int, int] = (8, 6)
    guideline_width: int = 2
    guideline_alpha: float = 0.5

    # Caption pill
    caption_padding_x: int = 16
    caption_height: int = 36
    caption_radius: int = 12
    caption_margin: int = 16
    caption_fill_alpha: float = 0.35
    caption_border_alpha: float = 0.25
    notes_limit: int = 60
    default_notes: str = "AI layout v1"

    tone: ToneParameters = field(default_factory=ToneParameters)

    # Run the two derivative variants on a thread pool instead of one after another
    parallel_derivatives: bool = False
