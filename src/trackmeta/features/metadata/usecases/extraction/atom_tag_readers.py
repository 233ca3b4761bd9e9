"""
Summary: Reader for MP4/M4B files tagged with iTunes-style atoms.
Why: Atom tags expose native per-field lists plus freeform atoms for credits iTunes lacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Final, override

from mutagen.mp4 import MP4, AtomDataType, MP4FreeForm

from trackmeta.shared.canonical_metadata import CanonicalMetadata

from ._base_readers import BaseMutagenReader
from ._tag_utils import first_or_none, parse_signed

__all__ = [
    "LABEL_ATOM",
    "LYRICIST_ATOM",
    "Mp4Reader",
    "build_atom_metadata",
    "freeform_strings",
]

FREEFORM_NAMESPACE: Final[str] = "com.apple.iTunes"
LABEL_ATOM: Final[str] = f"----:{FREEFORM_NAMESPACE}:Label"
LYRICIST_ATOM: Final[str] = f"----:{FREEFORM_NAMESPACE}:LYRICIST"

_TEXT_ENCODINGS: Final[dict[int, str]] = {
    AtomDataType.UTF8: "utf-8",
    AtomDataType.UTF16: "utf-16-be",
}


def _strings(tags: Any, key: str) -> tuple[str, ...]:
    return tuple(str(value) for value in tags.get(key, []))


def freeform_strings(tags: Any, key: str) -> tuple[str, ...]:
    """Decode the text entries of a freeform atom, skipping binary ones."""
    values: list[str] = []
    for value in tags.get(key, []):
        encoding = _TEXT_ENCODINGS.get(getattr(value, "dataformat", AtomDataType.UTF8))
        if encoding is None or not isinstance(value, (MP4FreeForm, bytes)):
            continue
        values.append(bytes(value).decode(encoding, errors="replace"))
    return tuple(values)


def _pair_number(tags: Any, key: str) -> int | None:
    """Return the first element of a ``trkn``/``disk`` pair."""
    pairs = tags.get(key)
    if not pairs:
        return None
    return int(pairs[0][0])


def build_atom_metadata(tags: Any, length: float | None) -> CanonicalMetadata:
    """Build canonical metadata from MP4 tags and the stream length in seconds."""

    return CanonicalMetadata(
        title=first_or_none(_strings(tags, "\xa9nam")),
        album=first_or_none(_strings(tags, "\xa9alb")),
        artists=_strings(tags, "\xa9ART"),
        album_artists=_strings(tags, "aART"),
        lyricists=freeform_strings(tags, LYRICIST_ATOM),
        composers=_strings(tags, "\xa9wrt"),
        genres=_strings(tags, "\xa9gen"),
        labels=freeform_strings(tags, LABEL_ATOM),
        track_number=_pair_number(tags, "trkn"),
        disc_number=_pair_number(tags, "disk"),
        year=parse_signed(first_or_none(_strings(tags, "\xa9day"))),
        duration=int(length) if length is not None else None,
        has_artwork=len(tags.get("covr", [])) > 0,
    )


class Mp4Reader(BaseMutagenReader):
    """Reader for MP4 audio and M4B audiobooks."""

    DECODER: ClassVar[str] = "mp4"
    FILE_CLASS: ClassVar[type | None] = MP4

    @override
    def read_metadata(self, file_path: Path) -> CanonicalMetadata:
        mp4 = self._open_file(file_path)
        tags = mp4.tags if mp4.tags is not None else {}
        info = getattr(mp4, "info", None)
        return build_atom_metadata(tags, getattr(info, "length", None))
