"""Readers for APEv2 item tags.

Where: src/trackmeta/features/metadata/usecases/extraction/item_tag_readers.py
What: Map flat APEv2 text items onto CanonicalMetadata for APE and Musepack files.
Why: Both containers share the tag layout, so one reader serves them.
"""

from __future__ import annotations

import io
import struct
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar, Final, override

from mutagen import MutagenError
from mutagen.apev2 import TEXT, APENoHeaderError, APETextValue, APEValue, APEv2, _APEv2Data

from trackmeta.shared.canonical_metadata import CanonicalMetadata

from ._base_readers import BaseMutagenReader, translate_decoder_error
from ._tag_utils import first_or_none, parse_leading_number, parse_signed

__all__ = [
    "ApeReader",
    "ITEM_KEYS",
    "TextItem",
    "build_item_metadata",
    "parse_text_items",
    "read_text_items",
    "text_item_values",
]

# Keys are compared with exact case; the item format does not standardise it.
ITEM_KEYS: Final[dict[str, str]] = {
    "artists": "Artist",
    "album": "Album",
    "album_artists": "Album artist",
    "title": "Title",
    "year": "Year",
    "disc_number": "Disc",
    "track_number": "Track",
    "lyricists": "LYRICIST",
    "composers": "COMPOSER",
    "genres": "GENRE",
    "labels": "PUBLISHER",
}

_ITEM_HEADER: Final[struct.Struct] = struct.Struct("<II")

TextItem = tuple[str, APETextValue]


def parse_text_items(tag: bytes, count: int) -> list[TextItem]:
    """Split raw APEv2 item data into ``(key, value)`` pairs in stored order.

    Unlike ``APEv2`` itself this keeps repeated keys and their original case.
    Binary and external-link items are dropped.
    """
    stream = io.BytesIO(tag)
    items: list[TextItem] = []
    for _ in range(count):
        header = stream.read(_ITEM_HEADER.size)
        if len(header) != _ITEM_HEADER.size:
            break
        size, flags = _ITEM_HEADER.unpack(header)

        key = bytearray()
        byte = stream.read(1)
        while byte not in (b"", b"\x00"):
            key += byte
            byte = stream.read(1)
        value = stream.read(size)

        if (flags >> 1) & 3 != TEXT:
            continue
        items.append((key.decode("ascii"), APEValue(value.decode("utf-8"), TEXT)))
    return items


def read_text_items(file_path: Path) -> list[TextItem]:
    """Locate the APEv2 tag in ``file_path`` and return its text items."""
    with open(file_path, "rb") as fileobj:
        located = _APEv2Data(fileobj)
    if not located.tag:
        raise APENoHeaderError("No APE tag found")
    return parse_text_items(located.tag, located.items)


def text_item_values(items: Sequence[TextItem], key: str) -> tuple[str, ...]:
    """Return every value stored under exactly ``key``, in tag order.

    A text item holding several null-separated values contributes each of them.
    """
    values: list[str] = []
    for item_key, item in items:
        if item_key == key:
            values.extend(item)
    return tuple(values)


def build_item_metadata(items: Sequence[TextItem]) -> CanonicalMetadata:
    """Build canonical metadata from ordered APEv2 text items.

    Duration and artwork are never derived from this format.
    """

    def first(field: str) -> str | None:
        return first_or_none(text_item_values(items, ITEM_KEYS[field]))

    return CanonicalMetadata(
        title=first("title"),
        album=first("album"),
        artists=text_item_values(items, ITEM_KEYS["artists"]),
        album_artists=text_item_values(items, ITEM_KEYS["album_artists"]),
        lyricists=text_item_values(items, ITEM_KEYS["lyricists"]),
        composers=text_item_values(items, ITEM_KEYS["composers"]),
        genres=text_item_values(items, ITEM_KEYS["genres"]),
        labels=text_item_values(items, ITEM_KEYS["labels"]),
        track_number=parse_leading_number(first("track_number")),
        disc_number=parse_leading_number(first("disc_number")),
        year=parse_signed(first("year")),
        duration=None,
        has_artwork=False,
    )


class ApeReader(BaseMutagenReader):
    """Reader for APE and Musepack files tagged with APEv2.

    ``APEv2`` validates the tag first; the items are then re-read in stored
    order because its mapping folds repeated and differently cased keys.
    """

    DECODER: ClassVar[str] = "apev2"
    FILE_CLASS: ClassVar[type | None] = APEv2
    MISSING_BLOCK_ERRORS: ClassVar[tuple[type[BaseException], ...]] = (APENoHeaderError,)

    @override
    def read_metadata(self, file_path: Path) -> CanonicalMetadata:
        _ = self._open_file(file_path)
        try:
            items = read_text_items(file_path)
        except (MutagenError, OSError, ValueError) as exc:
            raise translate_decoder_error(
                file_path,
                self.DECODER,
                exc,
                missing_block_errors=self.MISSING_BLOCK_ERRORS,
            ) from exc
        return build_item_metadata(items)
