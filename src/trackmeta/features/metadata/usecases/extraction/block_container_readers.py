"""
Summary: Reader for FLAC files, which carry a Vorbis comment block plus STREAMINFO.
Why: FLAC needs its comment block and computes duration from stream statistics.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, override

from mutagen.flac import FLAC

from trackmeta.shared.canonical_metadata import CanonicalMetadata

from ...domain.errors import MissingRequiredBlockError
from ._base_readers import BaseMutagenReader
from ._tag_utils import first_or_none, parse_signed, parse_unsigned

__all__ = ["FlacReader", "build_flac_metadata"]


def _values(comments: Any, key: str) -> tuple[str, ...]:
    return tuple(comments.get(key, []))


def _stream_duration(info: Any) -> int | None:
    """Total samples over sample rate, truncated to whole seconds."""
    total_samples = getattr(info, "total_samples", None)
    sample_rate = getattr(info, "sample_rate", None)
    if not isinstance(total_samples, int) or not sample_rate:
        return None
    return total_samples // sample_rate


def build_flac_metadata(flac: Any) -> CanonicalMetadata:
    """Build canonical metadata from a loaded FLAC file.

    Singular fields take the first value of their key; multi-valued fields
    keep every value in block order.
    """

    comments = flac.tags
    return CanonicalMetadata(
        title=first_or_none(_values(comments, "TITLE")),
        album=first_or_none(_values(comments, "ALBUM")),
        artists=_values(comments, "ARTIST"),
        album_artists=_values(comments, "ALBUMARTIST"),
        lyricists=_values(comments, "LYRICIST"),
        composers=_values(comments, "COMPOSER"),
        genres=_values(comments, "GENRE"),
        labels=_values(comments, "PUBLISHER"),
        track_number=parse_unsigned(first_or_none(_values(comments, "TRACKNUMBER"))),
        disc_number=parse_unsigned(first_or_none(_values(comments, "DISCNUMBER"))),
        year=parse_signed(first_or_none(_values(comments, "DATE"))),
        duration=_stream_duration(flac.info),
        has_artwork=len(flac.pictures) > 0,
    )


class FlacReader(BaseMutagenReader):
    """Reader for FLAC files; a missing comment block is a hard failure."""

    DECODER: ClassVar[str] = "flac"
    FILE_CLASS: ClassVar[type | None] = FLAC

    @override
    def read_metadata(self, file_path: Path) -> CanonicalMetadata:
        flac = self._open_file(file_path)
        if flac.tags is None:
            raise MissingRequiredBlockError(
                file_path, self.DECODER, "Could not find a Vorbis comment block within FLAC file"
            )
        return build_flac_metadata(flac)

