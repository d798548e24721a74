"""Render an SVG three ways: native size, fixed width, and padded on a background."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from svgpng import convert_svg_to_png


async def main(svg_path: Path) -> None:
    out_dir = svg_path.parent
    stem = svg_path.stem

    native = await convert_svg_to_png(svg_path, out_dir / f"{stem}.png", overwrite=True)
    print(f"native size: {native}")

    wide = await convert_svg_to_png(
        svg_path, out_dir / f"{stem}-600w.png", width=600, overwrite=True
    )
    print(f"600px wide: {wide}")

    padded = await convert_svg_to_png(
        svg_path,
        out_dir / f"{stem}-padded.png",
        width=400,
        height=400,
        padding=40,
        background_color="#f5f5f5",
        overwrite=True,
    )
    print(f"padded on background: {padded}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        raise SystemExit("usage: python examples/basic_conversion.py <file.svg>")
    asyncio.run(main(Path(sys.argv[1])))
