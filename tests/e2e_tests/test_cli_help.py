"""End-to-end smoke tests for the installed CLI entrypoint."""

from __future__ import annotations

import subprocess

import svgpng


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert svgpng.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["svg-to-png", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Render an SVG file" in result.stdout


def test_cli_without_arguments_prints_usage() -> None:
    result = subprocess.run(
        ["svg-to-png"], capture_output=True, text=True, check=False
    )

    assert result.returncode == 0, result.stderr
    assert "Usage" in result.stdout


def test_cli_missing_source_fails_cleanly() -> None:
    """Ensure a missing source exits 1 before any browser is launched."""
    result = subprocess.run(
        ["svg-to-png", "/tmp/definitely-missing-image.svg", "/tmp/out.png"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 1
    assert "SourceNotFoundError" in result.stderr
