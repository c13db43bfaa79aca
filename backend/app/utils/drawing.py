"""Vector helpers for overlay drawing (dashed polylines)."""

from __future__ import annotations

import math
from collections.abc import Sequence

from PIL import ImageDraw

Point = tuple[float, float]


def dash_segments(points: Sequence[Point], dash: tuple[float, float]) -> list[tuple[Point, Point]]:
    """Split a polyline into the "on" pieces of a dash pattern.

    The dash phase carries over vertices, so the pattern runs continuously
    along the whole path.
    """
    on, off = dash
    period = on + off
    if on <= 0:
        return []
    if off <= 0:
        return [(a, b) for a, b in zip(points, points[1:]) if a != b]

    segments: list[tuple[Point, Point]] = []
    phase = 0.0
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        length = math.hypot(x1 - x0, y1 - y0)
        if length == 0:
            continue
        ux, uy = (x1 - x0) / length, (y1 - y0) / length
        pos = 0.0
        while pos < length:
            if phase < on:
                step = min(on - phase, length - pos)
                segments.append(
                    ((x0 + ux * pos, y0 + uy * pos), (x0 + ux * (pos + step), y0 + uy * (pos + step)))
                )
            else:
                step = min(period - phase, length - pos)
            pos += step
            phase = (phase + step) % period
    return segments


def draw_dashed_polyline(
    draw: ImageDraw.ImageDraw,
    points: Sequence[Point],
    dash: tuple[float, float],
    fill: tuple[int, int, int, int],
    width: int = 1,
) -> int:
    """Stroke a dashed polyline. Returns the number of dash pieces drawn."""
    segments = dash_segments(points, dash)
    for start, end in segments:
        draw.line([start, end], fill=fill, width=width)
    return len(segments)
