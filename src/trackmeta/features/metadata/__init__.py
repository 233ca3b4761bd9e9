# Where: trackmeta.features.metadata.__init__
# What: Expose the metadata reader, format detection and error types.
# Why: Provide a cohesive import surface for the CLI and library callers.

from trackmeta.shared.canonical_metadata import CanonicalMetadata
from .domain import (
    AudioFormat,
    FileAccessError,
    MalformedContainerError,
    MetadataReadError,
    MissingRequiredBlockError,
    TagFamily,
    UnsupportedFormatError,
    detect,
    supported_extensions,
)
from .usecases.extraction import MetadataReader, read

__all__ = [
    "CanonicalMetadata",
    "AudioFormat",
    "TagFamily",
    "detect",
    "supported_extensions",
    "MetadataReader",
    "read",
    "MetadataReadError",
    "UnsupportedFormatError",
    "MalformedContainerError",
    "MissingRequiredBlockError",
    "FileAccessError",
]
