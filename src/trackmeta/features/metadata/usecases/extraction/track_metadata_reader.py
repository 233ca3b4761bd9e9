"""Audio file metadata dispatch.

Where: src/trackmeta/features/metadata/usecases/extraction/track_metadata_reader.py
What: Provide the MetadataReader facade routing each path to its format reader.
Why: Give callers one entry point that degrades to ``None`` instead of raising.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from trackmeta.platform.logging import logger
from trackmeta.shared.canonical_metadata import CanonicalMetadata

from ...domain.audio_format import AudioFormat, detect
from ...domain.errors import MalformedContainerError, MetadataReadError, UnsupportedFormatError
from ._base_readers import AudioFormatReader
from .atom_tag_readers import Mp4Reader
from .block_container_readers import FlacReader
from .comment_list_readers import OpusReader, VorbisReader
from .frame_tag_readers import AiffReader, Mp3Reader, WaveReader
from .item_tag_readers import ApeReader

__all__ = [
    "MetadataReader",
    "read",
]


class MetadataReader:
    """Facade class for reading metadata from audio files.

    The reader is chosen from the path extension alone. Readers hold no
    per-file state, so one instance per format serves every caller and
    every thread.
    """

    _ape_reader: ClassVar[ApeReader] = ApeReader()
    _mp4_reader: ClassVar[Mp4Reader] = Mp4Reader()

    # Mapping from audio format to its reader instance.
    _reader_map: ClassVar[dict[AudioFormat, AudioFormatReader]] = {
        AudioFormat.MP3: Mp3Reader(),
        AudioFormat.AIFF: AiffReader(),
        AudioFormat.WAVE: WaveReader(),
        AudioFormat.APE: _ape_reader,
        AudioFormat.MPC: _ape_reader,
        AudioFormat.OGG: VorbisReader(),
        AudioFormat.OPUS: OpusReader(),
        AudioFormat.FLAC: FlacReader(),
        AudioFormat.MP4: _mp4_reader,
        AudioFormat.M4B: _mp4_reader,
    }

    @classmethod
    def reader_for(cls, audio_format: AudioFormat) -> AudioFormatReader:
        """Return the reader registered for ``audio_format``."""
        return cls._reader_map[audio_format]

    @classmethod
    def extract(cls, file_path: Path | str) -> CanonicalMetadata:
        """Read metadata from an audio file, raising on failure.

        Args:
            file_path: Path to the audio file.

        Returns:
            CanonicalMetadata: Metadata read from the file's tags.

        Raises:
            UnsupportedFormatError: If the extension is not recognised.
            MetadataReadError: If the format reader fails.
        """
        path = Path(file_path)
        audio_format = detect(path)
        if audio_format is None:
            raise UnsupportedFormatError(path)

        try:
            return cls.reader_for(audio_format).read_metadata(path)
        except MetadataReadError:
            raise
        except Exception as exc:
            raise MalformedContainerError(
                path, audio_format.value, f"{type(exc).__name__}: {exc}"
            ) from exc

    @classmethod
    def read(cls, file_path: Path | str) -> CanonicalMetadata | None:
        """Read metadata from an audio file, degrading to ``None``.

        Unrecognised extensions return ``None`` without logging. Any reader
        failure is logged once at ERROR level and also returns ``None``.

        Args:
            file_path: Path to the audio file.

        Returns:
            CanonicalMetadata | None: Metadata, or ``None`` when unavailable.
        """
        path = Path(file_path)
        audio_format = detect(path)
        if audio_format is None:
            return None

        try:
            metadata = cls.extract(path)
        except MetadataReadError as exc:
            logger.error(
                "Error while reading file metadata for '%s': %s",
                path,
                exc,
                extra={
                    "metadata_event": "metadata.read.error",
                    "source_path": str(path),
                    "audio_format": audio_format.value,
                    "error_message": str(exc),
                },
            )
            return None

        logger.debug(
            "Read metadata for '%s'",
            path,
            extra={
                "metadata_event": "metadata.read.success",
                "source_path": str(path),
                "audio_format": audio_format.value,
            },
        )
        return metadata


def read(path: Path | str) -> CanonicalMetadata | None:
    """Read metadata from ``path``; see :meth:`MetadataReader.read`."""
    return MetadataReader.read(path)
