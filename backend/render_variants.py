"""Render the three concept variants of a local room photo to disk.

    python render_variants.py room.jpg -o out/ --room kitchen --theme rustic --budget 450000
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time

from app.engine.errors import DecodeError
from app.engine.pipeline import create_pipeline
from app.models.requests import GenerationRequest, Palette, RoomCategory, Theme

logger = logging.getLogger("render_variants")


def main() -> int:
    parser = argparse.ArgumentParser(description="Render GenArch concept variants for a photo")
    parser.add_argument("input", help="Room photo (any format Pillow can read)")
    parser.add_argument("-o", "--output", default=".", help="Output folder (default: current dir)")
    parser.add_argument("--room", choices=[c.value for c in RoomCategory], default=RoomCategory.LIVING_ROOM.value)
    parser.add_argument("--theme", choices=[t.value for t in Theme], default=Theme.MODERN.value)
    parser.add_argument("--palette", choices=[p.value for p in Palette], default=Palette.NEUTRAL.value)
    parser.add_argument("--budget", type=float, default=300000)
    parser.add_argument("--notes", default="")
    parser.add_argument("--parallel", action="store_true", help="Compute the two derivatives concurrently")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not os.path.isfile(args.input):
        print(f"File not found: {args.input}")
        return 1

    with open(args.input, "rb") as f:
        data = f.read()

    req = GenerationRequest(
        room_category=RoomCategory(args.room),
        theme=Theme(args.theme),
        palette=Palette(args.palette),
        budget=max(0.0, args.budget),
        notes=args.notes,
    )

    pipeline = create_pipeline()
    pipeline.config.parallel_derivatives = args.parallel

    t0 = time.perf_counter()
    try:
        variants = pipeline.generate(req, data)
    except DecodeError as e:
        print(e.message)
        return 1

    os.makedirs(args.output, exist_ok=True)
    for idx, png in enumerate(variants, start=1):
        out_path = os.path.join(args.output, f"design-{idx}.png")
        with open(out_path, "wb") as f:
            f.write(png)
        print(f"  → Saved: {out_path} ({len(png) // 1024} KB)")

    print(f"Done: {len(variants)} variants in {(time.perf_counter() - t0) * 1000:.0f}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
