"""Shared pytest configuration, marker assignment and SVG fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SQUARE_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<!-- 300x300 test card -->
<svg xmlns="http://www.w3.org/2000/svg" width="300" height="300" viewBox="0 0 300 300">
  <rect x="0" y="0" width="300" height="300" fill="#00ff00"/>
  <circle cx="150" cy="150" r="100" fill="#0000ff"/>
</svg>
"""

UNSIZED_SVG = """<svg xmlns="http://www.w3.org/2000/svg">
  <rect x="10" y="10" width="50" height="80" fill="#000000"/>
</svg>
"""

OFFSET_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="300" height="300" viewBox="0 0 300 300">
  <rect x="10" y="10" width="50" height="80" fill="#000000"/>
</svg>
"""

NOT_SVG = """<html><body><p>not an svg</p></body></html>
"""


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def square_svg(tmp_path: Path) -> Path:
    """SVG declaring 300x300 with a matching viewBox."""
    path = tmp_path / "square.svg"
    path.write_text(SQUARE_SVG, encoding="utf-8")
    return path


@pytest.fixture
def unsized_svg(tmp_path: Path) -> Path:
    """Well-formed SVG declaring no width, height or viewBox."""
    path = tmp_path / "unsized.svg"
    path.write_text(UNSIZED_SVG, encoding="utf-8")
    return path


@pytest.fixture
def offset_svg(tmp_path: Path) -> Path:
    """300x300 canvas holding a 50x80 rect at (10, 10)."""
    path = tmp_path / "offset.svg"
    path.write_text(OFFSET_SVG, encoding="utf-8")
    return path
