"""
Summary: Error taxonomy for per-format metadata readers.
Why: Hide decoder-specific exception types behind one hierarchy while keeping their messages.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class MetadataReadError(Exception):
    """Base class for failures while reading tags from one file."""

    def __init__(self, path: Path, decoder: str, message: str) -> None:
        super().__init__(message)
        self.path: Path = path
        self.decoder: str = decoder
        self.message: str = message

    def __str__(self) -> str:
        return f"[{self.decoder}] {self.message}"


class UnsupportedFormatError(MetadataReadError):
    """Raised when the path extension maps to no known format."""

    def __init__(self, path: Path) -> None:
        suffix = path.suffix.lower() or "<none>"
        super().__init__(path, "detector", f"Unsupported file format: {suffix}")


class MalformedContainerError(MetadataReadError):
    """Raised when a decoder cannot parse the file structure.

    ``partial`` holds whatever tag object the decoder managed to recover
    before failing, or ``None`` when nothing usable survived.
    """

    def __init__(self, path: Path, decoder: str, message: str, partial: Any | None = None) -> None:
        super().__init__(path, decoder, message)
        self.partial: Any | None = partial


class MissingRequiredBlockError(MetadataReadError):
    """Raised when a structure the format requires is absent."""


class FileAccessError(MetadataReadError):
    """Raised when the file cannot be opened or read."""


__all__ = [
    "FileAccessError",
    "MalformedContainerError",
    "MetadataReadError",
    "MissingRequiredBlockError",
    "UnsupportedFormatError",
]
