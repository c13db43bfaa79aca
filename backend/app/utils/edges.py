"""Edge detection and soft-light blending.

Luma -> 3x3 Sobel gradient magnitude -> grayscale edge map, fused back into
the image per RGB channel with a soft-light curve.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.ndimage import correlate

# Rec. 601 luma weights
_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])

SOBEL_X = np.array(
    [
        [-1, 0, 1],
        [-2, 0, 2],
        [-1, 0, 1],
    ],
    dtype=np.float64,
)
SOBEL_Y = np.array(
    [
        [-1, -2, -1],
        [0, 0, 0],
        [1, 2, 1],
    ],
    dtype=np.float64,
)


def luma(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """0.299R + 0.587G + 0.114B for every pixel of an RGB(A) array."""
    return pixels[..., :3].astype(np.float64) @ _LUMA_WEIGHTS


def sobel_magnitude(lum: NDArray[np.float64]) -> NDArray[np.uint8]:
    """Gradient magnitude clamped to [0, 255] and rounded.

    Only interior pixels are evaluated; the 1-pixel frame stays 0 because
    its 3x3 neighbourhood would leave the image.
    """
    h, w = lum.shape
    mag = np.zeros((h, w), dtype=np.uint8)
    if h < 3 or w < 3:
        return mag
    # Kernel is applied without flipping (correlation), as written above.
    gx = correlate(lum, SOBEL_X, mode="nearest")
    gy = correlate(lum, SOBEL_Y, mode="nearest")
    inner = np.hypot(gx[1:-1, 1:-1], gy[1:-1, 1:-1])
    mag[1:-1, 1:-1] = np.rint(np.clip(inner, 0.0, 255.0)).astype(np.uint8)
    return mag


def edge_map(pixels: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Grayscale RGBA edge map: magnitude in R, G, B; opaque inside, clear on the frame."""
    mag = sobel_magnitude(luma(pixels))
    h, w = mag.shape
    out = np.zeros((h, w, 4), dtype=np.uint8)
    out[..., 0] = out[..., 1] = out[..., 2] = mag
    if h >= 3 and w >= 3:
        out[1:-1, 1:-1, 3] = 255
    return out


def soft_light(base: NDArray, blend: NDArray) -> NDArray[np.uint8]:
    """(1 - 2b)a^2 + 2ba on operands normalized to [0, 1], back to 0-255."""
    a = np.asarray(base, dtype=np.float64) / 255.0
    b = np.asarray(blend, dtype=np.float64) / 255.0
    res = (1.0 - 2.0 * b) * a * a + 2.0 * b * a
    return np.clip(np.floor(res * 255.0 + 0.5), 0, 255).astype(np.uint8)


def apply_edge_glow(pixels: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Soft-light the Sobel edge map over the RGB channels; alpha is kept."""
    edges = edge_map(pixels)
    out = pixels.copy()
    out[..., :3] = soft_light(pixels[..., :3], edges[..., :3])
    return out
