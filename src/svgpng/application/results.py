"""Application-layer value and result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from svgpng.types import ComputedSizePayload, SizeRequestPayload


@dataclass(frozen=True)
class IntrinsicSize:
    """Pixel size an SVG declares for itself."""

    width: int
    height: int


@dataclass(frozen=True)
class SizeRequest:
    """Size the renderer should lay the SVG out at, padding excluded.

    An axis left as ``None`` is computed by the renderer from the content's
    aspect ratio.
    """

    width: int | None
    height: int | None
    trim: bool = False

    def to_payload(self) -> SizeRequestPayload:
        """Serialize for the in-page measurement script."""
        return {"width": self.width, "height": self.height, "trim": self.trim}


@dataclass(frozen=True)
class ComputedSize:
    """Content size reported by the renderer after layout."""

    width: int
    height: int

    @classmethod
    def from_payload(cls, payload: ComputedSizePayload) -> ComputedSize:
        """Deserialize the in-page measurement script result."""
        return cls(width=int(payload["width"]), height=int(payload["height"]))


@dataclass(frozen=True)
class RenderPlan:
    """Viewport content size and final PNG size including padding."""

    viewport_width: int
    viewport_height: int
    output_width: int
    output_height: int


@dataclass(frozen=True)
class OptimizedSvg:
    """Optimizer output."""

    data: str


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    output_path: Path
    source_path: Path
    plan: RenderPlan
    intrinsic_size: IntrinsicSize | None = None
    trimmed: bool = False
