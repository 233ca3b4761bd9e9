"""Readers for ID3 frame tags.

Where: src/trackmeta/features/metadata/usecases/extraction/frame_tag_readers.py
What: Map ID3 frames onto CanonicalMetadata for MP3, AIFF and WAVE files.
Why: One frame table serves three containers; only the way the tag is located differs.
"""

from __future__ import annotations

import abc
import io
import struct
from dataclasses import replace
from pathlib import Path
from typing import Any, ClassVar, Final, override

from mutagen import MutagenError
from mutagen.aiff import AIFF
from mutagen.id3 import ID3, ID3NoHeaderError
from mutagen.mp3 import MP3
from mutagen.wave import WAVE

from trackmeta.platform.logging import logger
from trackmeta.shared.canonical_metadata import CanonicalMetadata

from ...domain.errors import MalformedContainerError, MissingRequiredBlockError
from ._base_readers import BaseMutagenReader
from ._tag_utils import first_or_none, parse_unsigned, parse_year_prefix

__all__ = [
    "AiffReader",
    "FrameTagReader",
    "Mp3Reader",
    "WaveReader",
    "build_frame_metadata",
    "reparse_padded_tag",
    "salvage_truncated_chunk",
    "salvage_truncated_tag",
]

TEXT_LIST_FRAMES: Final[dict[str, str]] = {
    "artists": "TPE1",
    "album_artists": "TPE2",
    "lyricists": "TEXT",
    "composers": "TCOM",
    "genres": "TCON",
    "labels": "TPUB",
}

# Year resolution order: year, release date, original release date, recording date.
YEAR_FRAME_CHAIN: Final[tuple[tuple[str, ...], ...]] = (
    ("TYER",),
    ("TDRL",),
    ("TDOR", "TORY"),
    ("TDRC",),
)

_ID3_HEADER_SIZE: Final[int] = 10
# "FORM"/"RIFF", total size, form type
_IFF_FORM_HEADER_SIZE: Final[int] = 12
_IFF_CHUNK_HEADER_SIZE: Final[int] = 8


def _text_values(tags: ID3, frame_id: str) -> tuple[str, ...]:
    frame = tags.get(frame_id)
    if frame is None:
        return ()
    return tuple(str(value) for value in getattr(frame, "text", ()))


def _first_text(tags: ID3, frame_id: str) -> str | None:
    return first_or_none(_text_values(tags, frame_id))


def _number_part(tags: ID3, frame_id: str) -> int | None:
    """Read the ``x`` of an ``x/y`` frame such as TRCK or TPOS."""
    text = _first_text(tags, frame_id)
    if text is None:
        return None
    return parse_unsigned(text.split("/", 1)[0].strip())


def resolve_year(tags: ID3) -> int | None:
    """Return the first year found along ``YEAR_FRAME_CHAIN``."""
    for frame_ids in YEAR_FRAME_CHAIN:
        for frame_id in frame_ids:
            year = parse_year_prefix(_first_text(tags, frame_id))
            if year is not None:
                return year
    return None


def build_frame_metadata(tags: ID3) -> CanonicalMetadata:
    """Build canonical metadata from a loaded ID3 tag."""

    length_ms = parse_unsigned(_first_text(tags, "TLEN"))
    return CanonicalMetadata(
        title=_first_text(tags, "TIT2"),
        album=_first_text(tags, "TALB"),
        track_number=_number_part(tags, "TRCK"),
        disc_number=_number_part(tags, "TPOS"),
        year=resolve_year(tags),
        duration=length_ms // 1000 if length_ms is not None else None,
        has_artwork=len(tags.getall("APIC")) > 0,
        **{field: _text_values(tags, frame_id) for field, frame_id in TEXT_LIST_FRAMES.items()},
    )


def _synchsafe(data: bytes) -> int:
    return (data[0] << 21) | (data[1] << 14) | (data[2] << 7) | data[3]


def reparse_padded_tag(data: bytes) -> ID3 | None:
    """Parse an ID3v2 tag from ``data`` after zero-padding a short body.

    The padding is read by the frame parser as the end of the frame list.

    Returns:
        ID3 | None: The recovered tag, or ``None`` when ``data`` is not a
        truncated tag or no frame survived.
    """
    if len(data) < _ID3_HEADER_SIZE or not data.startswith(b"ID3"):
        return None
    body_size = _synchsafe(data[6:10])
    body = data[_ID3_HEADER_SIZE : _ID3_HEADER_SIZE + body_size]
    if len(body) >= body_size:
        return None

    padded = io.BytesIO(data[:_ID3_HEADER_SIZE] + body + bytes(body_size - len(body)))
    try:
        partial = ID3(padded, translate=False, load_v1=False)
    except MutagenError:
        return None
    return partial if len(partial) > 0 else None


def salvage_truncated_tag(file_path: Path) -> ID3 | None:
    """Recover the frames of a leading ID3v2 tag whose body runs past end of file."""
    try:
        with open(file_path, "rb") as fileobj:
            header = fileobj.read(_ID3_HEADER_SIZE)
            if len(header) < _ID3_HEADER_SIZE:
                return None
            data = header + fileobj.read(_synchsafe(header[6:10]))
    except OSError:
        return None
    return reparse_padded_tag(data)


def salvage_truncated_chunk(
    file_path: Path, chunk_ids: frozenset[bytes], size_format: str
) -> ID3 | None:
    """Recover a truncated ID3v2 tag stored in an IFF chunk.

    Args:
        file_path: AIFF or WAVE file.
        chunk_ids: Four-byte ids the tag chunk may carry.
        size_format: ``struct`` format of the chunk size field.

    Returns:
        ID3 | None: The recovered tag, or ``None`` when no truncated tag chunk
        was found.
    """
    try:
        with open(file_path, "rb") as fileobj:
            _ = fileobj.seek(_IFF_FORM_HEADER_SIZE)
            while True:
                header = fileobj.read(_IFF_CHUNK_HEADER_SIZE)
                if len(header) < _IFF_CHUNK_HEADER_SIZE:
                    return None
                (size,) = struct.unpack(size_format, header[4:])
                if header[:4] in chunk_ids:
                    data = fileobj.read(size)
                    break
                # Chunks are padded to an even length.
                _ = fileobj.seek(size + (size & 1), io.SEEK_CUR)
    except OSError:
        return None
    return reparse_padded_tag(data)


class FrameTagReader(BaseMutagenReader, abc.ABC):
    """Base reader for containers carrying an ID3v2 tag."""

    DECODER: ClassVar[str] = "id3"
    # Keep v2.3 year frames apart from the v2.4 recording date.
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"translate": False}
    TAG_CHUNK_IDS: ClassVar[frozenset[bytes]] = frozenset()
    CHUNK_SIZE_FORMAT: ClassVar[str] = ">I"

    def _tags_of(self, opened: Any) -> ID3 | None:
        """Return the ID3 tag held by the opened mutagen object."""
        return opened.tags

    def _salvage(self, file_path: Path) -> ID3 | None:
        """Return whatever frames survive in a truncated tag chunk."""
        return salvage_truncated_chunk(file_path, self.TAG_CHUNK_IDS, self.CHUNK_SIZE_FORMAT)

    @override
    def _open_file(self, file_path: Path) -> Any:
        try:
            return super()._open_file(file_path)
        except MalformedContainerError as exc:
            exc.partial = self._salvage(file_path)
            raise

    def _load_tags(self, file_path: Path) -> ID3:
        try:
            opened = self._open_file(file_path)
        except MalformedContainerError as exc:
            if exc.partial is None:
                raise
            logger.debug("Using partial ID3 tag for %s: %s", file_path, exc.message)
            return exc.partial

        tags = self._tags_of(opened)
        if tags is None:
            raise MissingRequiredBlockError(file_path, self.DECODER, "No ID3 tag found")
        return tags

    @override
    def read_metadata(self, file_path: Path) -> CanonicalMetadata:
        return build_frame_metadata(self._load_tags(file_path))


class Mp3Reader(FrameTagReader):
    """Reader for MP3 files; duration comes from the MPEG stream, not TLEN."""

    FILE_CLASS: ClassVar[type | None] = ID3
    MISSING_BLOCK_ERRORS: ClassVar[tuple[type[BaseException], ...]] = (ID3NoHeaderError,)

    @override
    def _tags_of(self, opened: Any) -> ID3 | None:
        return opened

    @override
    def _salvage(self, file_path: Path) -> ID3 | None:
        return salvage_truncated_tag(file_path)

    @staticmethod
    def scan_duration(file_path: Path) -> int | None:
        """Estimate playback length in whole seconds from the MPEG stream.

        mutagen takes the frame count from a Xing or VBRI header when one is
        present and otherwise divides the stream size by the first frame's
        bitrate; the stream is not decoded frame by frame. Any failure leaves
        the duration unset without failing the read.
        """
        try:
            stream = MP3(file_path)
            return int(stream.info.length)
        except Exception as exc:
            logger.debug("MPEG stream scan failed for %s: %s", file_path, exc)
            return None

    @override
    def read_metadata(self, file_path: Path) -> CanonicalMetadata:
        metadata = super().read_metadata(file_path)
        return replace(metadata, duration=self.scan_duration(file_path))


class AiffReader(FrameTagReader):
    """Reader for AIFF files with an ``ID3`` chunk."""

    FILE_CLASS: ClassVar[type | None] = AIFF
    TAG_CHUNK_IDS: ClassVar[frozenset[bytes]] = frozenset({b"ID3 "})


class WaveReader(FrameTagReader):
    """Reader for WAVE files with an ``id3`` chunk."""

    FILE_CLASS: ClassVar[type | None] = WAVE
    TAG_CHUNK_IDS: ClassVar[frozenset[bytes]] = frozenset({b"id3 ", b"ID3 "})
    CHUNK_SIZE_FORMAT: ClassVar[str] = "<I"
