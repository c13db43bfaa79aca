"""Tone-mapping operators: radial vignette and linear contrast curve.

Both work on HxWx4 uint8 RGBA arrays and never touch the alpha channel of
the image they are applied to.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# Contrast curve constant: the classic 259/255 formulation maps c in
# (-255, 255) onto a slope, with c = 0 giving exactly 1.0.
_CONTRAST_K = 259.0
_MIDPOINT = 128.0


def contrast_slope(c: float) -> float:
    """f = 259(c + 255) / (255(259 - c))."""
    return _CONTRAST_K * (c + 255.0) / (255.0 * (_CONTRAST_K - c))


def apply_contrast(pixels: NDArray[np.uint8], c: float) -> NDArray[np.uint8]:
    """out = clamp(f(in - 128) + 128) on RGB; returns a new array."""
    f = contrast_slope(c)
    out = pixels.copy()
    rgb = pixels[..., :3].astype(np.float64)
    out[..., :3] = np.clip(np.rint(f * (rgb - _MIDPOINT) + _MIDPOINT), 0, 255).astype(np.uint8)
    return out


def vignette_alpha(
    width: int,
    height: int,
    inner_frac: float,
    outer_frac: float,
    max_alpha: float,
) -> NDArray[np.float64]:
    """Per-pixel overlay alpha of a centered black radial gradient.

    Transparent within ``inner_frac * min(W, H)``, ``max_alpha`` at and beyond
    ``outer_frac * max(W, H)``, linear in between. Distances are measured
    from pixel centers.
    """
    r0 = inner_frac * min(width, height)
    r1 = outer_frac * max(width, height)
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    dist = np.hypot(xs + 0.5 - width / 2.0, ys + 0.5 - height / 2.0)
    if r1 <= r0:
        t = (dist >= r1).astype(np.float64)
    else:
        t = np.clip((dist - r0) / (r1 - r0), 0.0, 1.0)
    return t * max_alpha


def vignette_layer(width: int, height: int, inner_frac: float, outer_frac: float, max_alpha: float) -> NDArray[np.uint8]:
    """RGBA overlay (black, varying alpha) ready for source-over compositing."""
    layer = np.zeros((height, width, 4), dtype=np.uint8)
    alpha = vignette_alpha(width, height, inner_frac, outer_frac, max_alpha)
    layer[..., 3] = np.clip(np.rint(alpha * 255.0), 0, 255).astype(np.uint8)
    return layer
