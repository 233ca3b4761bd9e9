"""Tests for the reader error hierarchy."""

from pathlib import Path

from trackmeta.features.metadata.domain.errors import (
    FileAccessError,
    MalformedContainerError,
    MetadataReadError,
    MissingRequiredBlockError,
    UnsupportedFormatError,
)


def test_errors_share_base_and_keep_context() -> None:
    path = Path("/music/song.flac")
    for error in (
        MalformedContainerError(path, "flac", "bad block"),
        MissingRequiredBlockError(path, "flac", "no comments"),
        FileAccessError(path, "flac", "denied"),
    ):
        assert isinstance(error, MetadataReadError)
        assert error.path == path
        assert str(error).startswith("[flac] ")


def test_unsupported_format_names_suffix() -> None:
    error = UnsupportedFormatError(Path("notes.TXT"))

    assert error.decoder == "detector"
    assert error.message == "Unsupported file format: .txt"
    assert UnsupportedFormatError(Path("README")).message.endswith("<none>")


def test_malformed_partial_defaults_to_none() -> None:
    assert MalformedContainerError(Path("a.mp3"), "id3", "x").partial is None
