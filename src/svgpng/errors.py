"""Exception hierarchy for SVG to PNG conversion."""

from __future__ import annotations


class SvgPngError(Exception):
    """Base class for conversion failures surfaced to callers."""

    exit_code = 1


class SourceNotFoundError(SvgPngError):
    """Source SVG path does not reference an existing file."""


class DestinationExistsError(SvgPngError):
    """Destination exists and overwriting was not requested."""


class MeasurementError(SvgPngError):
    """Intrinsic SVG size could not be determined."""


class OptimizationError(SvgPngError):
    """SVG markup could not be optimized."""


class RenderingError(SvgPngError):
    """Browser launch, layout or capture failed."""


class InvalidOptionsError(SvgPngError):
    """Conversion options failed validation."""


class OutputError(SvgPngError):
    """PNG bytes could not be written to the destination."""


class DependencyError(SvgPngError):
    """An optional dependency required for the operation is missing."""
