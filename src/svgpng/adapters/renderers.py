"""Playwright-backed render engine."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

from svgpng.application.results import ComputedSize, SizeRequest
from svgpng.errors import RenderingError

logger = logging.getLogger(__name__)

# Runs inside the page. Receives a SizeRequestPayload and returns a
# ComputedSizePayload; it sees nothing of the Python process but its argument.
COMPUTE_SIZE_SCRIPT = """
(request) => {
    const svg = document.querySelector('svg');
    if (!svg) {
        throw new Error('No <svg> element found in document.');
    }

    if (request.trim) {
        const bbox = svg.getBBox();
        svg.setAttribute('viewBox', [bbox.x, bbox.y, bbox.width, bbox.height].join(' '));
    }

    // Without a viewBox the SVG has no aspect ratio once width/height go away.
    if (!svg.hasAttribute('viewBox')) {
        const box = svg.getBoundingClientRect();
        if (box.width > 0 && box.height > 0) {
            svg.setAttribute('viewBox', `0 0 ${box.width} ${box.height}`);
        }
    }

    svg.removeAttribute('width');
    svg.removeAttribute('height');
    if (request.width != null) {
        svg.style.width = `${request.width}px`;
    }
    if (request.height != null) {
        svg.style.height = `${request.height}px`;
    }

    const computed = window.getComputedStyle(svg);
    return {
        width: parseInt(computed.getPropertyValue('width'), 10),
        height: parseInt(computed.getPropertyValue('height'), 10),
    };
}
"""


class PlaywrightRenderPage:
    """Render page wrapping a Playwright ``Page``."""

    def __init__(self, page: Page) -> None:
        self._page = page

    async def set_content(self, html: str) -> None:
        """Load the HTML document into the page."""
        try:
            await self._page.set_content(html)
        except PlaywrightError as exc:
            raise RenderingError(f"Failed to load SVG document: {exc}") from exc

    async def compute_size(self, request: SizeRequest) -> ComputedSize:
        """Size the SVG in the live DOM and read back its computed box."""
        try:
            payload = await self._page.evaluate(
                COMPUTE_SIZE_SCRIPT, request.to_payload()
            )
        except PlaywrightError as exc:
            raise RenderingError(f"Failed to compute SVG dimensions: {exc}") from exc

        try:
            computed = ComputedSize.from_payload(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise RenderingError(
                f"Unexpected dimension payload from page: {payload!r}"
            ) from exc
        if computed.width <= 0 or computed.height <= 0:
            raise RenderingError(
                f"SVG rendered with an empty box ({computed.width}x{computed.height})."
            )
        logger.debug("computed SVG size %dx%d", computed.width, computed.height)
        return computed

    async def set_viewport(self, width: int, height: int) -> None:
        """Resize the viewport to the final output size."""
        try:
            await self._page.set_viewport_size({"width": width, "height": height})
        except PlaywrightError as exc:
            raise RenderingError(f"Failed to set viewport: {exc}") from exc

    async def screenshot(self, omit_background: bool) -> bytes:
        """Capture the viewport as PNG bytes."""
        try:
            return await self._page.screenshot(
                type="png", omit_background=omit_background
            )
        except PlaywrightError as exc:
            raise RenderingError(f"Failed to capture PNG: {exc}") from exc


class PlaywrightRenderEngine:
    """Launch a headless browser per page.

    Parameters
    ----------
    browser : str, default="chromium"
        Playwright browser type name.
    launch_options : Mapping[str, Any] | None, default=None
        Extra keyword arguments forwarded to ``BrowserType.launch``.
    """

    def __init__(
        self,
        browser: str = "chromium",
        launch_options: Mapping[str, Any] | None = None,
    ) -> None:
        self.browser = browser
        self.launch_options = dict(launch_options or {})

    @asynccontextmanager
    async def open_page(self) -> AsyncIterator[PlaywrightRenderPage]:
        """Yield a fresh page; the browser is closed on exit, even on failure."""
        async with async_playwright() as playwright:
            browser_type = getattr(playwright, self.browser, None)
            if browser_type is None:
                raise RenderingError(f"Unknown Playwright browser '{self.browser}'.")
            try:
                browser = await browser_type.launch(**self.launch_options)
            except PlaywrightError as exc:
                raise RenderingError(f"Failed to launch {self.browser}: {exc}") from exc

            logger.debug("launched %s", self.browser)
            try:
                try:
                    page = await browser.new_page(device_scale_factor=1)
                except PlaywrightError as exc:
                    raise RenderingError(f"Failed to open page: {exc}") from exc
                yield PlaywrightRenderPage(page)
            finally:
                await browser.close()
                logger.debug("closed %s", self.browser)
