"""src/trackmeta/ui/cli/commands/read.py
What: Read metadata for the paths given on the command line.
Why: Run blocking tag reads on a worker pool while keeping output in argument order.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import final

from trackmeta.features.metadata import CanonicalMetadata, MetadataReader, detect
from trackmeta.platform.logging import logger
from trackmeta.ui.cli.args.options import ReadArgs
from trackmeta.ui.cli.display.metadata_table import MetadataDisplay
from trackmeta.ui.cli.models import ReadOutcome


@final
class ReadCommand:
    """Read each path through the dispatcher and display the results."""

    def __init__(
        self,
        args: ReadArgs,
        *,
        read_fn: Callable[[Path], CanonicalMetadata | None] | None = None,
        display: MetadataDisplay | None = None,
    ) -> None:
        self._args = args
        self._read_fn = read_fn or MetadataReader.read
        self._display = display or MetadataDisplay()

    def execute(self) -> list[ReadOutcome]:
        """Read every path and render the outcomes.

        Returns:
            list[ReadOutcome]: One outcome per path, in argument order.
        """
        with ThreadPoolExecutor(max_workers=self._args.workers) as pool:
            outcomes = list(pool.map(self._read_one, self._args.paths))

        if self._args.json_output:
            self._display.show_json(outcomes)
        else:
            self._display.show_outcomes(outcomes, quiet=self._args.quiet)
        return outcomes

    def _read_one(self, path: Path) -> ReadOutcome:
        audio_format = detect(path)
        if audio_format is None:
            logger.info(
                "Skipping unsupported file: %s",
                path,
                extra={"metadata_event": "metadata.read.skip", "source_path": str(path)},
            )
            return ReadOutcome(path=path, audio_format=None, metadata=None)
        return ReadOutcome(path=path, audio_format=audio_format, metadata=self._read_fn(path))
