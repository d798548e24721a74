"""Top-level API for SVG to PNG conversion."""

from __future__ import annotations

from pathlib import Path

from svgpng.schemas import DEFAULT_SVG_LENGTH, DEFAULT_TIMEOUT_SECONDS
from svgpng.types import PathInput

__version__ = "0.1.0"


async def convert_svg_to_png(
    source_path: PathInput,
    dest_path: PathInput,
    *,
    width: int | None = None,
    height: int | None = None,
    padding: int = 0,
    background_color: str | None = None,
    omit_background: bool = True,
    overwrite: bool = False,
    trim: bool = False,
    default_svg_length: int = DEFAULT_SVG_LENGTH,
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
) -> Path:
    """Render an SVG file to a PNG file.

    Parameters
    ----------
    source_path : str | PathLike
        Path to the source SVG file.
    dest_path : str | PathLike
        Path where the PNG is written.
    width : int, optional
        Output width in pixels. With ``height`` unset, height follows the
        SVG's aspect ratio.
    height : int, optional
        Output height in pixels. With ``width`` unset, width follows the
        SVG's aspect ratio.
    padding : int, default=0
        Padding in pixels on every side, included in ``width``/``height``.
    background_color : str, optional
        CSS color painted behind the SVG. Forces an opaque background.
    omit_background : bool, default=True
        Render with a transparent background.
    overwrite : bool, default=False
        Replace an existing file at ``dest_path``.
    trim : bool, default=False
        Tighten the SVG viewBox to its content bounding box before sizing.
    default_svg_length : int, default=1000
        Width and height used when the SVG declares no measurable size.
    timeout : float | None, default=60.0
        Seconds allowed for browser rendering; ``None`` waits indefinitely.

    Returns
    -------
    Path
        Path to the generated PNG file.
    """
    from .api import convert_svg_to_png as _impl

    return await _impl(
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


def convert_svg_to_png_sync(
    source_path: PathInput,
    dest_path: PathInput,
    *,
    width: int | None = None,
    height: int | None = None,
    padding: int = 0,
    background_color: str | None = None,
    omit_background: bool = True,
    overwrite: bool = False,
    trim: bool = False,
    default_svg_length: int = DEFAULT_SVG_LENGTH,
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
) -> Path:
    """Blocking variant of :func:`convert_svg_to_png`.

    Must not be called from a running event loop.
    """
    from .api import convert_svg_to_png_sync as _impl

    return _impl(
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


__all__ = [
    "DEFAULT_SVG_LENGTH",
    "convert_svg_to_png",
    "convert_svg_to_png_sync",
]
