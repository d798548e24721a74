"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_SVG_LENGTH = 1000
DEFAULT_TIMEOUT_SECONDS = 60.0

_UNSAFE_CSS = re.compile(r"[;{}<>\\]")


class ConversionOptionsConfig(BaseModel):
    """Validated conversion options merged over documented defaults."""

    model_config = ConfigDict(extra="forbid")

    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    padding: int = Field(default=0, ge=0)
    background_color: str | None = None
    omit_background: bool = True
    overwrite: bool = False
    trim: bool = False
    default_svg_length: int = Field(default=DEFAULT_SVG_LENGTH, gt=0)
    timeout: float | None = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @field_validator("background_color")
    @classmethod
    def _validate_background_color(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if _UNSAFE_CSS.search(value):
            raise ValueError(
                "background_color must be a single CSS color value."
            )
        return value

    @model_validator(mode="after")
    def _validate_padding_fits(self) -> ConversionOptionsConfig:
        for axis in ("width", "height"):
            size = getattr(self, axis)
            if size is not None and size <= 2 * self.padding:
                raise ValueError(
                    f"{axis}={size} leaves no room for padding={self.padding} "
                    "on both sides."
                )
        return self


class ConversionRequestConfig(BaseModel):
    """Validated file paths for a single conversion."""

    model_config = ConfigDict(extra="forbid")

    source_path: Path
    dest_path: Path

    @field_validator("dest_path")
    @classmethod
    def _validate_dest_path(cls, value: Path) -> Path:
        if not value.name:
            raise ValueError("dest_path must name a file.")
        return value
