"""Intrinsic SVG size measurement."""

from __future__ import annotations

import math
import re
from pathlib import Path

from lxml import etree

from svgpng.application.results import IntrinsicSize
from svgpng.errors import MeasurementError

# CSS absolute units at 96 dpi; em/ex use the browser default font size.
UNIT_TO_PX: dict[str, float] = {
    "": 1.0,
    "px": 1.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
    "m": 96.0 / 2.54 * 100,
    "pt": 96.0 / 72,
    "pc": 96.0 / 6,
    "em": 16.0,
    "ex": 8.0,
}

_LENGTH = re.compile(
    r"^\s*([+]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)\s*([a-z%]*)\s*$",
    re.IGNORECASE,
)
_VIEWBOX_SEPARATOR = re.compile(r"[\s,]+")


def parse_length(value: str | None) -> int | None:
    """Convert an absolute SVG length attribute to whole pixels.

    Returns ``None`` for missing, relative (``%``), unknown-unit or
    non-positive lengths.
    """
    if value is None:
        return None
    match = _LENGTH.match(value)
    if match is None:
        return None
    number, unit = match.groups()
    factor = UNIT_TO_PX.get(unit.lower())
    if factor is None:
        return None
    scaled = float(number) * factor
    if not math.isfinite(scaled):
        return None
    pixels = round(scaled)
    return pixels if pixels > 0 else None


def parse_viewbox(value: str | None) -> tuple[float, float] | None:
    """Return ``(width, height)`` of a valid ``viewBox`` attribute."""
    if not value:
        return None
    parts = [part for part in _VIEWBOX_SEPARATOR.split(value.strip()) if part]
    if len(parts) != 4:
        return None
    try:
        numbers = [float(part) for part in parts]
    except ValueError:
        return None
    if not all(math.isfinite(number) for number in numbers):
        return None
    _, _, width, height = numbers
    if width <= 0 or height <= 0:
        return None
    return width, height


def _whole_pixels(value: float, svg_path: Path) -> int:
    if not math.isfinite(value):
        raise MeasurementError(f"SVG {svg_path} declares an unusable size.")
    return max(1, round(value))


class LxmlSvgMeasurer:
    """Read declared ``width``/``height``/``viewBox`` from the SVG root."""

    def measure(self, svg_path: Path) -> IntrinsicSize:
        """Measure the intrinsic pixel size of an SVG file.

        Parameters
        ----------
        svg_path : Path
            SVG file to inspect.

        Returns
        -------
        IntrinsicSize
            Declared size. A single declared axis is completed from the
            ``viewBox`` ratio; without either attribute the ``viewBox`` size
            itself is used.

        Raises
        ------
        MeasurementError
            If the file is not well-formed, its root is not ``<svg>``, or it
            declares no usable size.
        """
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = etree.parse(str(svg_path), parser).getroot()
        except (etree.XMLSyntaxError, OSError) as exc:
            raise MeasurementError(f"Unable to parse SVG {svg_path}: {exc}") from exc

        if not isinstance(root.tag, str) or etree.QName(root).localname != "svg":
            raise MeasurementError(f"Root element of {svg_path} is not <svg>.")

        width = parse_length(root.get("width"))
        height = parse_length(root.get("height"))
        if width is not None and height is not None:
            return IntrinsicSize(width=width, height=height)

        viewbox = parse_viewbox(root.get("viewBox"))
        if viewbox is None:
            raise MeasurementError(
                f"SVG {svg_path} declares neither a usable width/height nor a viewBox."
            )

        vb_width, vb_height = viewbox
        ratio = vb_width / vb_height
        if width is not None:
            return IntrinsicSize(
                width=width, height=_whole_pixels(width / ratio, svg_path)
            )
        if height is not None:
            return IntrinsicSize(
                width=_whole_pixels(height * ratio, svg_path), height=height
            )
        return IntrinsicSize(
            width=_whole_pixels(vb_width, svg_path),
            height=_whole_pixels(vb_height, svg_path),
        )
