"""Output dimension policy.

Sizing happens in two steps around the browser layout:

1. :func:`resolve_size_request` turns the options and the SVG's intrinsic
   size into the size the renderer should lay the SVG out at. Explicit
   ``width``/``height`` win over the intrinsic size; with neither set the
   intrinsic size (or ``default_svg_length`` when it is unknown) is used for
   both axes. A single explicit axis leaves the other one to the renderer so
   the aspect ratio is kept. Padding is subtracted from every known axis.
2. :func:`plan_render` adds the padding back onto the size the renderer
   reports, producing the final PNG size.
"""

from __future__ import annotations

import logging

from svgpng.application.options import ConversionOptions
from svgpng.application.results import (
    ComputedSize,
    IntrinsicSize,
    RenderPlan,
    SizeRequest,
)

logger = logging.getLogger(__name__)

MIN_LENGTH = 1


def _subtract_padding(length: int | None, padding: int, axis: str) -> int | None:
    if length is None or padding <= 0:
        return length
    inner = length - 2 * padding
    if inner < MIN_LENGTH:
        logger.warning(
            "padding=%d exceeds %s=%d; clamping render %s to %dpx",
            padding,
            axis,
            length,
            axis,
            MIN_LENGTH,
        )
        return MIN_LENGTH
    return inner


def resolve_size_request(
    options: ConversionOptions,
    intrinsic_size: IntrinsicSize | None,
) -> SizeRequest:
    """Decide the layout size requested from the renderer.

    Parameters
    ----------
    options : ConversionOptions
        Validated conversion options.
    intrinsic_size : IntrinsicSize | None
        Measured SVG size, or ``None`` when the SVG could not be measured.

    Returns
    -------
    SizeRequest
        Padding-free layout size. ``trim`` is forced on when the intrinsic
        size is unknown.
    """
    width = options.width
    height = options.height

    if width is None and height is None:
        if intrinsic_size is not None:
            width, height = intrinsic_size.width, intrinsic_size.height
        else:
            width = height = options.default_svg_length

    return SizeRequest(
        width=_subtract_padding(width, options.padding, "width"),
        height=_subtract_padding(height, options.padding, "height"),
        trim=options.trim or intrinsic_size is None,
    )


def plan_render(computed: ComputedSize, padding: int) -> RenderPlan:
    """Add symmetric padding to the laid-out size."""
    return RenderPlan(
        viewport_width=computed.width,
        viewport_height=computed.height,
        output_width=computed.width + 2 * padding,
        output_height=computed.height + 2 * padding,
    )
