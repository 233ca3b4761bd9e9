"""Shared base classes for metadata readers.

Where: src/trackmeta/features/metadata/usecases/extraction/_base_readers.py
What: Define the reader interface and the mutagen file-opening/error-translation logic.
Why: Keep each format module down to field mapping while failures surface uniformly.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar

from mutagen import MutagenError

from trackmeta.shared.canonical_metadata import CanonicalMetadata

from ...domain.errors import (
    FileAccessError,
    MalformedContainerError,
    MetadataReadError,
    MissingRequiredBlockError,
)

__all__ = [
    "AudioFormatReader",
    "BaseMutagenReader",
    "describe_decoder_error",
    "translate_decoder_error",
]

SHORT_READ_MESSAGE = "unexpected end of data"


def describe_decoder_error(exc: BaseException) -> str:
    """Return the first non-empty message along the exception chain.

    mutagen re-raises short reads as bare errors whose text is empty, so the
    chained exceptions are searched before falling back to the type name.
    """
    current: BaseException | None = exc
    while current is not None:
        text = str(current)
        if text:
            return text
        if isinstance(current, OSError):
            return SHORT_READ_MESSAGE
        current = current.__cause__ or current.__context__
    return type(exc).__name__


def translate_decoder_error(
    file_path: Path,
    decoder: str,
    exc: BaseException,
    *,
    missing_block_errors: tuple[type[BaseException], ...] = (),
    partial: Any | None = None,
) -> MetadataReadError:
    """Map a decoder exception onto the reader error taxonomy.

    Args:
        file_path: File being read.
        decoder: Name of the decoder that raised.
        exc: The original exception.
        missing_block_errors: Decoder exceptions meaning "required structure absent".
        partial: Best-effort tag recovered before the failure, if any.

    Returns:
        MetadataReadError: The translated error; the caller raises it.
    """
    message = describe_decoder_error(exc)
    if isinstance(exc, OSError) or isinstance(exc.__cause__, OSError):
        return FileAccessError(file_path, decoder, message)
    if missing_block_errors and isinstance(exc, missing_block_errors):
        return MissingRequiredBlockError(file_path, decoder, message)
    return MalformedContainerError(file_path, decoder, message, partial=partial)


class AudioFormatReader(abc.ABC):
    """Abstract base class for per-format metadata readers."""

    DECODER: ClassVar[str] = ""

    @abc.abstractmethod
    def read_metadata(self, file_path: Path) -> CanonicalMetadata:
        """Read tags from ``file_path``.

        Raises:
            MetadataReadError: If the file cannot be read or parsed.
        """
        raise NotImplementedError


class BaseMutagenReader(AudioFormatReader, abc.ABC):
    """Base class for readers backed by a mutagen file class."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    MISSING_BLOCK_ERRORS: ClassVar[tuple[type[BaseException], ...]] = ()

    def _open_file(self, file_path: Path) -> Any:
        """Open ``file_path`` with ``FILE_CLASS``, translating decoder failures."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")

        try:
            return self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
        except (MutagenError, OSError) as exc:
            raise translate_decoder_error(
                file_path,
                self.DECODER,
                exc,
                missing_block_errors=self.MISSING_BLOCK_ERRORS,
            ) from exc
        except Exception as exc:
            # mutagen occasionally leaks struct/value errors on hostile input
            raise MalformedContainerError(
                file_path, self.DECODER, f"{type(exc).__name__}: {exc}"
            ) from exc
