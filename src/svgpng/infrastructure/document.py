"""HTML host document for the SVG being rendered."""

from __future__ import annotations

_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
html {{ margin: 0; padding: 0; overflow: hidden; }}
body {{ margin: 0; padding: {padding}px;{background} }}
svg {{ display: block; }}
</style>
</head>
<body>{svg}</body>
</html>
"""


def build_html_document(
    svg: str,
    padding: int = 0,
    background_color: str | None = None,
) -> str:
    """Embed SVG markup into a page with padding and background as inline style.

    Parameters
    ----------
    svg : str
        Optimized SVG markup (no XML declaration).
    padding : int, default=0
        Body padding in pixels on every side.
    background_color : str | None, default=None
        CSS color painted behind the SVG canvas.

    Returns
    -------
    str
        Complete HTML document.
    """
    background = f" background-color: {background_color};" if background_color else ""
    return _TEMPLATE.format(svg=svg, padding=padding, background=background)
