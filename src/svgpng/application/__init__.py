"""Application-layer use-cases and option objects."""

from __future__ import annotations

from svgpng.application.options import ConversionOptions, ConversionRequest
from svgpng.application.ports import (
    RenderEngine,
    RenderPage,
    SvgMeasurer,
    SvgOptimizer,
)
from svgpng.application.results import (
    ConversionResult,
    IntrinsicSize,
    RenderPlan,
    SizeRequest,
)
from svgpng.schemas import DEFAULT_SVG_LENGTH, DEFAULT_TIMEOUT_SECONDS


def build_conversion_options(
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
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from svgpng.application.use_cases import build_conversion_options as _impl

    return _impl(
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


async def convert_svg_file(
    request: ConversionRequest,
    *,
    measurer: SvgMeasurer | None = None,
    optimizer: SvgOptimizer | None = None,
    engine: RenderEngine | None = None,
) -> ConversionResult:
    """Convert an SVG file via lazy use-case import."""
    from svgpng.application.use_cases import convert_svg_file as _impl

    return await _impl(
        request,
        measurer=measurer,
        optimizer=optimizer,
        engine=engine,
    )


__all__ = [
    "ConversionOptions",
    "ConversionRequest",
    "ConversionResult",
    "IntrinsicSize",
    "RenderEngine",
    "RenderPage",
    "RenderPlan",
    "SizeRequest",
    "SvgMeasurer",
    "SvgOptimizer",
    "build_conversion_options",
    "convert_svg_file",
]
