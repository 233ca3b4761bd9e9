"""
Summary: Readers for Vorbis comment lists carried by Ogg Vorbis and Opus files.
Why: Share one key-matching routine; formats differ only in how the list is opened.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable, ClassVar, Final, override

from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from trackmeta.shared.canonical_metadata import CanonicalMetadata

from ._base_readers import BaseMutagenReader
from ._tag_utils import parse_signed, parse_unsigned

__all__ = [
    "COMMENT_KEYS",
    "CommentListReader",
    "OpusReader",
    "VorbisReader",
    "collect_comment_metadata",
]

# Lowercased comment key -> canonical field
COMMENT_KEYS: Final[dict[str, str]] = {
    "title": "title",
    "album": "album",
    "artist": "artists",
    "albumartist": "album_artists",
    "tracknumber": "track_number",
    "discnumber": "disc_number",
    "date": "year",
    "lyricist": "lyricists",
    "composer": "composers",
    "genre": "genres",
    "publisher": "labels",
}

_SEQUENCE_FIELDS: Final[frozenset[str]] = frozenset(
    {"artists", "album_artists", "lyricists", "composers", "genres", "labels"}
)
_NUMERIC_PARSERS: Final[dict[str, Callable[[str], int | None]]] = {
    "track_number": parse_unsigned,
    "disc_number": parse_unsigned,
    "year": parse_signed,
}


def collect_comment_metadata(comments: Iterable[tuple[str, str]]) -> CanonicalMetadata:
    """Fold an ordered comment list into canonical metadata.

    Keys match case-insensitively. Singular fields keep the last occurrence,
    sequence fields append in encounter order. A number that does not parse
    resets its field to ``None``. Unknown keys are ignored.
    """

    values: dict[str, Any] = {field: [] for field in _SEQUENCE_FIELDS}
    for key, value in comments:
        field = COMMENT_KEYS.get(key.lower())
        if field is None:
            continue
        if field in _SEQUENCE_FIELDS:
            values[field].append(value)
        elif field in _NUMERIC_PARSERS:
            values[field] = _NUMERIC_PARSERS[field](value)
        else:
            values[field] = value

    for field in _SEQUENCE_FIELDS:
        values[field] = tuple(values[field])
    return CanonicalMetadata(**values)


class CommentListReader(BaseMutagenReader, abc.ABC):
    """Base reader for Ogg streams whose tags are a Vorbis comment list.

    Duration and artwork are not derived from the comment header.
    """

    def _comments(self, file_path: Path) -> Iterable[tuple[str, str]]:
        tags = self._open_file(file_path).tags
        return list(tags) if tags is not None else []

    @override
    def read_metadata(self, file_path: Path) -> CanonicalMetadata:
        return collect_comment_metadata(self._comments(file_path))


class VorbisReader(CommentListReader):
    """Reader for Ogg Vorbis files."""

    DECODER: ClassVar[str] = "vorbis"
    FILE_CLASS: ClassVar[type | None] = OggVorbis


class OpusReader(CommentListReader):
    """Reader for Ogg Opus files."""

    DECODER: ClassVar[str] = "opus"
    FILE_CLASS: ClassVar[type | None] = OggOpus
