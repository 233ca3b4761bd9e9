"""
Summary: Read normalized tag metadata from audio files.
Why: Expose the reader, detector and model at the package root for library callers.
"""

from trackmeta.features.metadata import (
    AudioFormat,
    CanonicalMetadata,
    FileAccessError,
    MalformedContainerError,
    MetadataReadError,
    MetadataReader,
    MissingRequiredBlockError,
    TagFamily,
    UnsupportedFormatError,
    detect,
    read,
    supported_extensions,
)

__version__ = "0.1.0"

__all__ = [
    "read",
    "detect",
    "supported_extensions",
    "MetadataReader",
    "CanonicalMetadata",
    "AudioFormat",
    "TagFamily",
    "MetadataReadError",
    "UnsupportedFormatError",
    "MalformedContainerError",
    "MissingRequiredBlockError",
    "FileAccessError",
]
