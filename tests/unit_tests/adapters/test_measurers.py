"""Unit tests for intrinsic SVG size measurement."""

from __future__ import annotations

from pathlib import Path

import pytest

from svgpng.adapters.measurers import LxmlSvgMeasurer, parse_length, parse_viewbox
from svgpng.application.results import IntrinsicSize
from svgpng.errors import MeasurementError

SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'


def _write(tmp_path: Path, markup: str) -> Path:
    path = tmp_path / "image.svg"
    path.write_text(markup, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("300", 300),
        ("300px", 300),
        (" 12.6 ", 13),
        ("1in", 96),
        ("72pt", 96),
        ("2.54cm", 96),
        ("25.4mm", 96),
        ("1pc", 16),
        ("2em", 32),
        ("1e2", 100),
        ("50%", None),
        ("auto", None),
        ("10furlongs", None),
        ("0", None),
        ("1e999", None),
        ("1e400px", None),
        (None, None),
    ],
)
def test_parse_length(value: str | None, expected: int | None) -> None:
    assert parse_length(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0 0 300 150", (300.0, 150.0)),
        ("-10,-10,20,40", (20.0, 40.0)),
        ("0 0 0 10", None),
        ("0 0 10", None),
        ("a b c d", None),
        ("0 0 inf 100", None),
        ("0 0 nan 100", None),
        ("nan 0 100 100", None),
        ("", None),
    ],
)
def test_parse_viewbox(value: str, expected: tuple[float, float] | None) -> None:
    assert parse_viewbox(value) == expected


def test_measures_declared_width_and_height(square_svg: Path) -> None:
    assert LxmlSvgMeasurer().measure(square_svg) == IntrinsicSize(300, 300)


def test_width_only_uses_viewbox_ratio(tmp_path: Path) -> None:
    path = _write(tmp_path, f'<svg {SVG_NS} width="200" viewBox="0 0 400 100"/>')
    assert LxmlSvgMeasurer().measure(path) == IntrinsicSize(200, 50)


def test_height_only_uses_viewbox_ratio(tmp_path: Path) -> None:
    path = _write(tmp_path, f'<svg {SVG_NS} height="50" viewBox="0 0 400 100"/>')
    assert LxmlSvgMeasurer().measure(path) == IntrinsicSize(200, 50)


def test_viewbox_only(tmp_path: Path) -> None:
    path = _write(tmp_path, f'<svg {SVG_NS} viewBox="0 0 64.4 32"/>')
    assert LxmlSvgMeasurer().measure(path) == IntrinsicSize(64, 32)


def test_percentage_size_falls_back_to_viewbox(tmp_path: Path) -> None:
    path = _write(
        tmp_path, f'<svg {SVG_NS} width="100%" height="100%" viewBox="0 0 120 60"/>'
    )
    assert LxmlSvgMeasurer().measure(path) == IntrinsicSize(120, 60)


def test_unsized_svg_is_unmeasurable(unsized_svg: Path) -> None:
    with pytest.raises(MeasurementError, match="neither"):
        LxmlSvgMeasurer().measure(unsized_svg)


def test_non_svg_root_is_unmeasurable(tmp_path: Path) -> None:
    path = _write(tmp_path, '<html width="10" height="10"/>')
    with pytest.raises(MeasurementError, match="not <svg>"):
        LxmlSvgMeasurer().measure(path)


def test_malformed_markup_is_unmeasurable(tmp_path: Path) -> None:
    path = _write(tmp_path, "<svg width='10'")
    with pytest.raises(MeasurementError, match="Unable to parse"):
        LxmlSvgMeasurer().measure(path)


@pytest.mark.parametrize(
    "attributes",
    [
        'width="1e999" height="1e999"',
        'viewBox="0 0 inf 100"',
        'viewBox="0 0 nan 100"',
        'height="10" viewBox="0 0 1e300 1e-300"',
    ],
)
def test_non_finite_sizes_are_unmeasurable(tmp_path: Path, attributes: str) -> None:
    path = _write(tmp_path, f"<svg {SVG_NS} {attributes}/>")
    with pytest.raises(MeasurementError):
        LxmlSvgMeasurer().measure(path)
