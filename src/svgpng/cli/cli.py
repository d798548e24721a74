#!/usr/bin/env python3
"""
svgpng.cli.cli

Typer-based CLI for rendering an SVG file to a PNG image.

Rendering drives a headless Chromium through Playwright. Install the browser
once after installing the package:

    uv pip install -e ".[cli]"
    playwright install chromium

Examples
--------
Render at the SVG's own size:

    svg-to-png logo.svg logo.png

Render 600px wide with 20px of white padding, replacing any existing file:

    svg-to-png logo.svg logo.png --width 600 --padding 20 --backgroundColor white -y
"""

from __future__ import annotations

import logging
import time
import traceback
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import typer

from svgpng import __version__
from svgpng.errors import SvgPngError
from svgpng.schemas import DEFAULT_SVG_LENGTH, DEFAULT_TIMEOUT_SECONDS

app = typer.Typer(
    name="svg-to-png",
    help="Render an SVG file to a PNG image.",
    context_settings={"help_option_names": ["-H", "--help"]},
    add_completion=False,
)


# -----------------------------
# Dependency checks / utilities
# -----------------------------
@dataclass(frozen=True)
class MissingDep:
    """Represent a missing optional dependency."""

    import_name: str
    extra_name: str
    purpose: str


def _is_importable(module: str) -> bool:
    """Check whether a module can be resolved.

    Parameters
    ----------
    module : str
        Module name to resolve.

    Returns
    -------
    bool
        ``True`` if the module can be imported, otherwise ``False``.
    """
    try:
        import importlib.util

        return importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        return False


def _require_deps(missing: Sequence[MissingDep]) -> None:
    """Raise a Typer error if any required deps are missing."""
    not_found = [d for d in missing if not _is_importable(d.import_name)]
    if not not_found:
        return

    extras = sorted({d.extra_name for d in not_found})
    details = "\n".join(
        f"- Missing '{d.import_name}' ({d.purpose}). Install extra: .[{d.extra_name}]"
        for d in not_found
    )

    uv_hint = f'uv pip install -e ".[cli,{",".join(extras)}]"'
    pip_hint = f'pip install "svgpng[cli,{",".join(extras)}]"'

    msg = (
        "Missing optional dependencies for this command.\n\n"
        f"{details}\n\n"
        "Install with uv (recommended):\n"
        f"  {uv_hint}\n\n"
        "Or with pip:\n"
        f"  {pip_hint}\n"
    )
    raise typer.BadParameter(msg)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


# -----------------------------
# Command
# -----------------------------
@app.command()
def convert_cmd(
    ctx: typer.Context,
    source: Path | None = typer.Argument(None, help="Path to the source SVG file."),
    output: Path | None = typer.Argument(None, help="Where to write the PNG file."),
    height: int | None = typer.Option(
        None, "--height", "-h", help="Set the height of the output image."
    ),
    width: int | None = typer.Option(
        None, "--width", "-w", help="Set the width of the output image."
    ),
    padding: int = typer.Option(
        0, "--padding", "-p", help="Set the amount of padding around the output image."
    ),
    background_color: str | None = typer.Option(
        None,
        "--backgroundColor",
        "--background-color",
        "-b",
        help="Set the background color of the output image as any valid CSS color.",
    ),
    default_svg_length: int = typer.Option(
        DEFAULT_SVG_LENGTH,
        "--defaultSvgLength",
        "--default-svg-length",
        "-f",
        help="Width and height to render output if SVG dimensions are invalid.",
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", "-y", help="Overwrite output file if it exists."
    ),
    trim: bool = typer.Option(
        False, "--trim", "-t", help="Trim the output image to the bounds of the SVG."
    ),
    opaque: bool = typer.Option(
        False, "--opaque", "-o", help="Save the output image with an opaque background."
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT_SECONDS, "--timeout", help="Seconds allowed for browser rendering."
    ),
    validate: bool = typer.Option(
        False, "--validate", help="Re-open the written PNG and report its size."
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging and show full tracebacks on error."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Render an SVG file to a PNG image.

    Use -H/--help for help; -h sets the output height.
    """
    del version
    if source is None and output is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)
    if source is None or output is None:
        raise typer.BadParameter("Both <source> and <output> are required.")

    if validate:
        _require_deps([MissingDep("PIL", "validate", "PNG output validation")])

    if debug:
        logging.basicConfig(level=logging.DEBUG)

    started = time.perf_counter()
    try:
        from svgpng.api import convert_svg_to_png_sync

        out = convert_svg_to_png_sync(
            source,
            output,
            width=width,
            height=height,
            padding=padding,
            background_color=background_color,
            omit_background=not opaque,
            overwrite=overwrite,
            trim=trim,
            default_svg_length=default_svg_length,
            timeout=timeout,
        )
        elapsed = time.perf_counter() - started

        from svgpng.validate import validate_png_if_requested

        size = validate_png_if_requested(out, validate)
        typer.echo(f'PNG written to "{out}" in {elapsed:.3f}s')
        if size is not None:
            typer.echo(f"Validated: {size[0]}x{size[1]} PNG")
    except SvgPngError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


if __name__ == "__main__":
    app()
