"""Shared type aliases and in-page message payloads."""

from __future__ import annotations

from os import PathLike
from typing import TypeAlias, TypedDict

PathInput: TypeAlias = str | PathLike[str]


class SizeRequestPayload(TypedDict):
    """Arguments serialized into the in-page measurement script."""

    width: int | None
    height: int | None
    trim: bool


class ComputedSizePayload(TypedDict):
    """Result deserialized from the in-page measurement script."""

    width: int
    height: int
