"""Image codec boundary: bytes <-> Pillow RGBA images.

Decode and encode are the only blocking points of a generation call; every
stage in between works on in-memory buffers.
"""

from __future__ import annotations

import base64
import io

from PIL import Image, ImageOps, UnidentifiedImageError

from app.engine.errors import DecodeError


def decode_image(data: bytes) -> Image.Image:
    """Decode raw bytes into an RGBA image, applying EXIF orientation."""
    if not data:
        raise DecodeError("Could not decode image: no data")
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
        img = ImageOps.exif_transpose(img)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, SyntaxError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e

    if img.width <= 0 or img.height <= 0:
        raise DecodeError(f"Could not decode image: zero dimensions {img.width}x{img.height}")
    return img.convert("RGBA")


def encode_png(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def to_data_url(png: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
