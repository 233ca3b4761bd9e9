"""src/trackmeta/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from trackmeta.features.metadata import AudioFormat, CanonicalMetadata


@dataclass(slots=True, frozen=True)
class ReadOutcome:
    """Result of reading one path from the command line."""

    path: Path
    audio_format: AudioFormat | None
    metadata: CanonicalMetadata | None

    @property
    def skipped(self) -> bool:
        """The extension is not recognised, so nothing was read."""
        return self.audio_format is None

    @property
    def failed(self) -> bool:
        """A recognised file produced no metadata."""
        return self.audio_format is not None and self.metadata is None


__all__ = ["ReadOutcome"]
