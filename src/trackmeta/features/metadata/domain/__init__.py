"""
Summary: Domain types for the metadata feature.
Why: Keep format detection and error types free of decoder imports.
"""

from .audio_format import AudioFormat, TagFamily, detect, supported_extensions
from .errors import (
    FileAccessError,
    MalformedContainerError,
    MetadataReadError,
    MissingRequiredBlockError,
    UnsupportedFormatError,
)

__all__ = [
    "AudioFormat",
    "TagFamily",
    "detect",
    "supported_extensions",
    "MetadataReadError",
    "UnsupportedFormatError",
    "MalformedContainerError",
    "MissingRequiredBlockError",
    "FileAccessError",
]
