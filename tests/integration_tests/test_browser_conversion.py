"""Browser-backed conversion tests; skipped when Chromium cannot launch."""

from __future__ import annotations

import asyncio
import os
import time
from pathlib import Path

import pytest
from PIL import Image

from svgpng import convert_svg_to_png_sync
from svgpng.adapters.renderers import PlaywrightRenderEngine
from svgpng.errors import DestinationExistsError, SvgPngError


@pytest.fixture(scope="module", autouse=True)
def _require_browser() -> None:
    async def _probe() -> None:
        async with PlaywrightRenderEngine().open_page():
            pass

    try:
        asyncio.run(_probe())
    except SvgPngError as exc:
        pytest.skip(f"Chromium unavailable: {exc}")


def _size(path: Path) -> tuple[int, int]:
    with Image.open(path) as image:
        return image.size


def test_native_size(square_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(square_svg, tmp_path / "out.png")
    assert _size(out) == (300, 300)


def test_width_preserves_aspect(square_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(square_svg, tmp_path / "out.png", width=600)
    assert _size(out) == (600, 600)


def test_height_preserves_aspect(square_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(square_svg, tmp_path / "out.png", height=120)
    assert _size(out) == (120, 120)


def test_explicit_dimensions_skew(square_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(
        square_svg, tmp_path / "out.png", width=500, height=1200
    )
    assert _size(out) == (500, 1200)


def test_trim_keeps_requested_dimensions(offset_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(
        offset_svg, tmp_path / "out.png", width=500, height=500, trim=True
    )
    assert _size(out) == (500, 500)
    with Image.open(out) as image:
        # Empty on the untrimmed canvas, covered by the trimmed rect.
        assert image.convert("RGBA").getpixel((250, 250))[3] == 255


def test_trim_with_width_follows_trimmed_aspect(offset_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(offset_svg, tmp_path / "out.png", width=500, trim=True)
    assert _size(out) == (500, 800)
    with Image.open(out) as image:
        assert image.convert("RGBA").getpixel((2, 2))[3] == 255


def test_untrimmed_width_follows_canvas_aspect(offset_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(offset_svg, tmp_path / "out.png", width=500)
    assert _size(out) == (500, 500)
    with Image.open(out) as image:
        assert image.convert("RGBA").getpixel((495, 495))[3] == 0


def test_unmeasurable_svg_uses_default_length(unsized_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(unsized_svg, tmp_path / "out.png")
    assert _size(out) == (1000, 1000)


def test_unmeasurable_svg_honours_explicit_size(unsized_svg: Path, tmp_path: Path) -> None:
    out = convert_svg_to_png_sync(
        unsized_svg, tmp_path / "out.png", width=500, height=500
    )
    assert _size(out) == (500, 500)


def test_padding_keeps_output_size_and_paints_background(
    square_svg: Path, tmp_path: Path
) -> None:
    out = convert_svg_to_png_sync(
        square_svg,
        tmp_path / "out.png",
        width=200,
        height=200,
        padding=20,
        background_color="#ff0000",
    )
    assert _size(out) == (200, 200)
    with Image.open(out) as image:
        assert image.convert("RGB").getpixel((5, 5)) == (255, 0, 0)


def test_overwrite_semantics(square_svg: Path, tmp_path: Path) -> None:
    """Existing output survives without overwrite and is replaced with it."""
    out = convert_svg_to_png_sync(square_svg, tmp_path / "out.png")
    old_mtime = os.stat(out).st_mtime_ns

    with pytest.raises(DestinationExistsError):
        convert_svg_to_png_sync(square_svg, out)
    assert os.stat(out).st_mtime_ns == old_mtime

    time.sleep(0.05)
    convert_svg_to_png_sync(square_svg, out, overwrite=True)
    assert os.stat(out).st_mtime_ns != old_mtime
