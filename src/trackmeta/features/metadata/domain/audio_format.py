"""
Summary: Map file extensions to the closed set of supported audio formats.
Why: Select a tag reader from the path alone, without touching file content.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final


class TagFamily(Enum):
    """Tagging convention shared by one or more container formats."""

    FRAME_TAG = "frame-tag"
    ITEM_TAG = "item-tag"
    COMMENT_LIST = "comment-list"
    BLOCK_CONTAINER = "block-container"
    ATOM_TAG = "atom-tag"


class AudioFormat(Enum):
    """Audio container formats recognised by the reader."""

    AIFF = "aiff"
    APE = "ape"
    FLAC = "flac"
    MP3 = "mp3"
    MP4 = "mp4"
    M4B = "m4b"
    MPC = "mpc"
    OGG = "ogg"
    OPUS = "opus"
    WAVE = "wave"

    @property
    def family(self) -> TagFamily:
        """Tagging convention used by this container."""
        return _FAMILIES[self]


_FAMILIES: Final[dict[AudioFormat, TagFamily]] = {
    AudioFormat.AIFF: TagFamily.FRAME_TAG,
    AudioFormat.MP3: TagFamily.FRAME_TAG,
    AudioFormat.WAVE: TagFamily.FRAME_TAG,
    AudioFormat.APE: TagFamily.ITEM_TAG,
    AudioFormat.MPC: TagFamily.ITEM_TAG,
    AudioFormat.OGG: TagFamily.COMMENT_LIST,
    AudioFormat.OPUS: TagFamily.COMMENT_LIST,
    AudioFormat.FLAC: TagFamily.BLOCK_CONTAINER,
    AudioFormat.MP4: TagFamily.ATOM_TAG,
    AudioFormat.M4B: TagFamily.ATOM_TAG,
}

EXTENSION_FORMATS: Final[dict[str, AudioFormat]] = {
    ".aif": AudioFormat.AIFF,
    ".aifc": AudioFormat.AIFF,
    ".aiff": AudioFormat.AIFF,
    ".ape": AudioFormat.APE,
    ".flac": AudioFormat.FLAC,
    ".m4a": AudioFormat.MP4,
    ".m4b": AudioFormat.M4B,
    ".mp3": AudioFormat.MP3,
    ".mp4": AudioFormat.MP4,
    ".mpc": AudioFormat.MPC,
    ".ogg": AudioFormat.OGG,
    ".opus": AudioFormat.OPUS,
    ".wav": AudioFormat.WAVE,
    ".wave": AudioFormat.WAVE,
}


def detect(path: Path | str) -> AudioFormat | None:
    """Return the audio format implied by ``path``'s extension.

    Args:
        path: File path to classify. The file does not need to exist.

    Returns:
        AudioFormat | None: The matching format, or ``None`` when the
        extension is not recognised.
    """

    return EXTENSION_FORMATS.get(Path(path).suffix.lower())


def supported_extensions() -> list[str]:
    """Return every recognised extension, sorted."""
    return sorted(EXTENSION_FORMATS)


__all__ = [
    "AudioFormat",
    "EXTENSION_FORMATS",
    "TagFamily",
    "detect",
    "supported_extensions",
]
