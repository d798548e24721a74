"""PNG output validation helpers."""

from __future__ import annotations

from pathlib import Path

from svgpng.errors import DependencyError, OutputError


def read_png_size(output_path: Path) -> tuple[int, int]:
    """Open a PNG with Pillow and return its ``(width, height)``.

    Raises
    ------
    DependencyError
        If Pillow is not installed.
    OutputError
        If the file is missing or is not a readable PNG.
    """
    try:
        from PIL import Image, UnidentifiedImageError
    except Exception as exc:  # pragma: no cover - dependency guarded by CLI
        raise DependencyError("Validation requires Pillow to be installed.") from exc

    try:
        with Image.open(output_path) as image:
            image.verify()
            if image.format != "PNG":
                raise OutputError(f"{output_path} is not a PNG (found {image.format}).")
            return image.size
    except (OSError, UnidentifiedImageError) as exc:
        raise OutputError(f"PNG validation failed: {exc}") from exc


def validate_png_if_requested(
    output_path: Path, validate: bool
) -> tuple[int, int] | None:
    """Validate the written PNG when validation is enabled."""
    if not validate:
        return None
    return read_png_size(output_path)
