"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from svgpng.schemas import DEFAULT_SVG_LENGTH, DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ConversionOptions:
    """Rendering options for one conversion.

    ``omit_background`` is always ``False`` when ``background_color`` is set.
    """

    width: int | None = None
    height: int | None = None
    padding: int = 0
    background_color: str | None = None
    omit_background: bool = True
    overwrite: bool = False
    trim: bool = False
    default_svg_length: int = DEFAULT_SVG_LENGTH
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if self.background_color:
            object.__setattr__(self, "omit_background", False)


@dataclass(frozen=True)
class ConversionRequest:
    """Source, destination and options of a single conversion."""

    source_path: Path
    dest_path: Path
    options: ConversionOptions = ConversionOptions()
