# Where: trackmeta.shared.canonical_metadata
# What: Canonical metadata value shared by every format reader.
# Why: Collapse all tagging conventions into one schema the library index can consume.

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class CanonicalMetadata:
    """Normalized tags of a single audio file.

    Sequence fields keep the order in which the tag stores its values and
    never drop duplicates. Absent scalar fields are ``None``; absent sequence
    fields are empty tuples.
    """

    title: str | None = None
    album: str | None = None
    artists: tuple[str, ...] = field(default_factory=tuple)
    album_artists: tuple[str, ...] = field(default_factory=tuple)
    lyricists: tuple[str, ...] = field(default_factory=tuple)
    composers: tuple[str, ...] = field(default_factory=tuple)
    genres: tuple[str, ...] = field(default_factory=tuple)
    labels: tuple[str, ...] = field(default_factory=tuple)
    track_number: int | None = None
    disc_number: int | None = None
    year: int | None = None
    duration: int | None = None
    has_artwork: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict, omitting absent fields.

        ``has_artwork`` is always present; ``None`` scalars and empty
        sequences are left out.
        """

        payload: dict[str, Any] = {}
        for item in fields(self):
            name = item.name
            value = getattr(self, name)
            if name == "has_artwork":
                payload[name] = value
            elif isinstance(value, tuple):
                if value:
                    payload[name] = list(value)
            elif value is not None:
                payload[name] = value
        return payload


__all__ = ["CanonicalMetadata"]
