"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import Protocol

from svgpng.application.results import (
    ComputedSize,
    IntrinsicSize,
    OptimizedSvg,
    SizeRequest,
)


class SvgMeasurer(Protocol):
    """Report the intrinsic size an SVG file declares."""

    def measure(self, svg_path: Path) -> IntrinsicSize:
        """Raise ``MeasurementError`` when the size cannot be determined."""


class SvgOptimizer(Protocol):
    """Minify and normalize SVG markup."""

    def optimize(self, svg_data: bytes, *, path: Path | None = None) -> OptimizedSvg:
        """Return optimized markup or raise ``OptimizationError``.

        ``svg_data`` is the raw file content; its XML declaration names the
        encoding.
        """


class RenderPage(Protocol):
    """Off-screen page that lays out and captures one document."""

    async def set_content(self, html: str) -> None:
        """Load an HTML document."""

    async def compute_size(self, request: SizeRequest) -> ComputedSize:
        """Apply the size request inside the page and report the laid-out size."""

    async def set_viewport(self, width: int, height: int) -> None:
        """Resize the viewport at device scale factor 1."""

    async def screenshot(self, omit_background: bool) -> bytes:
        """Capture the viewport as PNG bytes."""


class RenderEngine(Protocol):
    """Provide render pages whose resources are released on exit."""

    def open_page(self) -> AbstractAsyncContextManager[RenderPage]:
        """Launch the engine and open a fresh page."""
