"""src/trackmeta/ui/cli/display/metadata_table.py
What: Render read outcomes as rich tables or a JSON document.
Why: Keep console output formatting apart from the read orchestration.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from trackmeta.features.metadata import CanonicalMetadata
from trackmeta.ui.cli.models import ReadOutcome


@final
class MetadataDisplay:
    """Handles metadata display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_outcomes(self, outcomes: Sequence[ReadOutcome], quiet: bool = False) -> None:
        """Print one table per file followed by a summary.

        Args:
            outcomes: Read outcomes in argument order.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        for outcome in outcomes:
            if outcome.skipped:
                self.console.print(f"[yellow]Skipped {outcome.path}: unsupported format[/yellow]")
            elif outcome.metadata is None:
                self.console.print(f"[red]No metadata for {outcome.path}[/red]")
            else:
                self.console.print(self.build_table(outcome))

        self.render_summary(outcomes)

    def show_json(self, outcomes: Sequence[ReadOutcome]) -> None:
        """Print every outcome as one JSON object keyed by path.

        Files without metadata map to ``null``.
        """
        payload: dict[str, dict[str, Any] | None] = {
            str(outcome.path): outcome.metadata.to_dict() if outcome.metadata else None
            for outcome in outcomes
        }
        self.console.print_json(data=payload)

    def build_table(self, outcome: ReadOutcome) -> Table:
        assert outcome.metadata is not None
        format_name = outcome.audio_format.name if outcome.audio_format else "?"
        table = Table(
            title=f"{outcome.path} ({format_name})",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Field", style="bold")
        table.add_column("Value")

        for name, value in self._rows(outcome.metadata):
            table.add_row(name, value)
        return table

    @staticmethod
    def _rows(metadata: CanonicalMetadata) -> list[tuple[str, Text]]:
        rows: list[tuple[str, Text]] = []
        for name, value in metadata.to_dict().items():
            if isinstance(value, list):
                rendered = Text("; ".join(str(item) for item in value))
            elif isinstance(value, bool):
                rendered = Text("yes" if value else "no", style="green" if value else "dim")
            else:
                rendered = Text(str(value))
            rows.append((name, rendered))
        return rows

    def render_summary(self, outcomes: Sequence[ReadOutcome]) -> None:
        read_count = sum(1 for outcome in outcomes if outcome.metadata is not None)
        failed_count = sum(1 for outcome in outcomes if outcome.failed)
        skipped_count = sum(1 for outcome in outcomes if outcome.skipped)

        self.console.print("\n[bold]Read Summary:[/bold]")
        self.console.print(f"Total files: {len(outcomes)}")
        self.console.print(f"[green]Read: {read_count}[/green]")
        if skipped_count:
            self.console.print(f"[yellow]Skipped: {skipped_count}[/yellow]")
        if failed_count:
            self.console.print(f"[red]Failed: {failed_count}[/red]")
