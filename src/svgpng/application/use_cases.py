"""Application use-cases orchestrating SVG to PNG conversion."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from pydantic import ValidationError

from svgpng.adapters.measurers import LxmlSvgMeasurer
from svgpng.adapters.optimizers import LxmlSvgOptimizer
from svgpng.adapters.renderers import PlaywrightRenderEngine
from svgpng.application.options import ConversionOptions, ConversionRequest
from svgpng.application.ports import RenderEngine, SvgMeasurer, SvgOptimizer
from svgpng.application.resolver import plan_render, resolve_size_request
from svgpng.application.results import (
    ConversionResult,
    IntrinsicSize,
    RenderPlan,
    SizeRequest,
)
from svgpng.errors import (
    DestinationExistsError,
    InvalidOptionsError,
    MeasurementError,
    OutputError,
    RenderingError,
    SourceNotFoundError,
)
from svgpng.infrastructure.document import build_html_document
from svgpng.schemas import (
    DEFAULT_SVG_LENGTH,
    DEFAULT_TIMEOUT_SECONDS,
    ConversionOptionsConfig,
    ConversionRequestConfig,
)

logger = logging.getLogger(__name__)


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
    """Build typed option object from command/API params."""
    try:
        config = ConversionOptionsConfig(
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
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid conversion options: {exc}") from exc

    return ConversionOptions(**config.model_dump())


def build_conversion_request(
    *,
    source_path: Path,
    dest_path: Path,
    options: ConversionOptions,
) -> ConversionRequest:
    """Build a validated conversion request."""
    try:
        config = ConversionRequestConfig(source_path=source_path, dest_path=dest_path)
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid conversion paths: {exc}") from exc
    return ConversionRequest(
        source_path=config.source_path,
        dest_path=config.dest_path,
        options=options,
    )


def _measure(measurer: SvgMeasurer, source_path: Path) -> IntrinsicSize | None:
    try:
        size = measurer.measure(source_path)
    except MeasurementError as exc:
        logger.info("falling back to trimmed default size: %s", exc)
        return None
    logger.debug("intrinsic size %dx%d", size.width, size.height)
    return size


async def _render(
    engine: RenderEngine,
    markup: str,
    size_request: SizeRequest,
    options: ConversionOptions,
) -> tuple[RenderPlan, bytes]:
    async with engine.open_page() as page:
        await page.set_content(markup)
        computed = await page.compute_size(size_request)
        plan = plan_render(computed, options.padding)
        await page.set_viewport(plan.output_width, plan.output_height)
        png = await page.screenshot(omit_background=options.omit_background)
    return plan, png


def _write_png(dest_path: Path, data: bytes, overwrite: bool) -> None:
    mode = "wb" if overwrite else "xb"
    try:
        with dest_path.open(mode) as handle:
            handle.write(data)
    except FileExistsError as exc:
        raise DestinationExistsError(f'File exists at "{dest_path}".') from exc
    except OSError as exc:
        raise OutputError(f'Unable to write PNG to "{dest_path}": {exc}') from exc


async def convert_svg_file(
    request: ConversionRequest,
    *,
    measurer: SvgMeasurer | None = None,
    optimizer: SvgOptimizer | None = None,
    engine: RenderEngine | None = None,
) -> ConversionResult:
    """Use-case: render an SVG file to a PNG file.

    Parameters
    ----------
    request : ConversionRequest
        Source, destination and options.
    measurer, optimizer, engine : optional
        Collaborators; default to the lxml and Playwright adapters.

    Returns
    -------
    ConversionResult
        Written path and the render plan used.

    Raises
    ------
    SourceNotFoundError
        If the source SVG does not exist.
    DestinationExistsError
        If the destination exists and overwriting is disabled.
    OptimizationError
        If the SVG markup cannot be optimized. The file is decoded as its XML
        declaration says, defaulting to UTF-8.
    RenderingError
        If the browser fails or the render exceeds ``options.timeout``.
    """
    source_path = request.source_path
    dest_path = request.dest_path
    options = request.options

    if not source_path.is_file():
        raise SourceNotFoundError(f'SVG file not found at "{source_path}".')
    if dest_path.exists() and not options.overwrite:
        raise DestinationExistsError(f'File exists at "{dest_path}".')

    measurer = measurer or LxmlSvgMeasurer()
    optimizer = optimizer or LxmlSvgOptimizer()
    engine = engine or PlaywrightRenderEngine()

    intrinsic_size = _measure(measurer, source_path)
    size_request = resolve_size_request(options, intrinsic_size)

    optimized = optimizer.optimize(source_path.read_bytes(), path=source_path)
    markup = build_html_document(
        svg=optimized.data,
        padding=options.padding,
        background_color=options.background_color,
    )

    try:
        plan, png = await asyncio.wait_for(
            _render(engine, markup, size_request, options),
            timeout=options.timeout,
        )
    except TimeoutError as exc:
        raise RenderingError(
            f"Rendering {source_path} exceeded {options.timeout}s."
        ) from exc

    _write_png(dest_path, png, options.overwrite)
    logger.debug(
        "wrote %s (%dx%d)", dest_path, plan.output_width, plan.output_height
    )
    return ConversionResult(
        output_path=dest_path,
        source_path=source_path,
        plan=plan,
        intrinsic_size=intrinsic_size,
        trimmed=size_request.trim,
    )
