"""Tests for metadata table rendering."""

from io import StringIO
from pathlib import Path

from rich.console import Console

from trackmeta.features.metadata import AudioFormat, CanonicalMetadata
from trackmeta.ui.cli.display.metadata_table import MetadataDisplay
from trackmeta.ui.cli.models import ReadOutcome


def test_table_lists_present_fields() -> None:
    buffer = StringIO()
    display = MetadataDisplay(Console(file=buffer, width=120, color_system=None))
    outcome = ReadOutcome(
        path=Path("song.flac"),
        audio_format=AudioFormat.FLAC,
        metadata=CanonicalMetadata(title="Song", artists=("A", "B"), duration=200, has_artwork=True),
    )

    display.console.print(display.build_table(outcome))

    output = buffer.getvalue()
    assert "song.flac (FLAC)" in output
    assert "A; B" in output
    assert "200" in output
    assert "yes" in output
    assert "album" not in output
