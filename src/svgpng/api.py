"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from svgpng.application.use_cases import build_conversion_options
from svgpng.application.use_cases import build_conversion_request
from svgpng.application.use_cases import convert_svg_file
from svgpng.schemas import DEFAULT_SVG_LENGTH
from svgpng.schemas import DEFAULT_TIMEOUT_SECONDS
from svgpng.types import PathInput


async def convert_svg_to_png(
    source_path: PathInput,
    dest_path: PathInput,
    *,
    width: Optional[int] = None,
    height: Optional[int] = None,
    padding: int = 0,
    background_color: Optional[str] = None,
    omit_background: bool = True,
    overwrite: bool = False,
    trim: bool = False,
    default_svg_length: int = DEFAULT_SVG_LENGTH,
    timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
) -> Path:
    """Render an SVG file to a PNG file and return the PNG path."""
    options = build_conversion_options(
        width=width,
        height=height,
        padding=padding,
        background_color=background_color,
        omit_background=omit_background,
        overwrite=overwrite,
        trim=trim,
        default_svg_length=default_svg_length,
        timeout=timeout,
    )
    request = build_conversion_request(
        source_path=Path(source_path),
        dest_path=Path(dest_path),
        options=options,
    )
    result = await convert_svg_file(request)
    return result.output_path


def convert_svg_to_png_sync(
    source_path: PathInput,
    dest_path: PathInput,
    *,
    width: Optional[int] = None,
    height: Optional[int] = None,
    padding: int = 0,
    background_color: Optional[str] = None,
    omit_background: bool = True,
    overwrite: bool = False,
    trim: bool = False,
    default_svg_length: int = DEFAULT_SVG_LENGTH,
    timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
) -> Path:
    """Blocking wrapper around :func:`convert_svg_to_png`."""
    return asyncio.run(
        convert_svg_to_png(
            source_path,
            dest_path,
            width=width,
            height=height,
            padding=padding,
            background_color=background_color,
            omit_background=omit_background,
            overwrite=overwrite,
            trim=trim,
            default_svg_length=default_svg_length,
            timeout=timeout,
        )
    )
