"""List the file extensions the reader recognises."""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.table import Table

from trackmeta.features.metadata import detect, supported_extensions


@final
class FormatsCommand:
    """Print supported extensions with their format and tag family."""

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console or Console()

    def execute(self) -> None:
        table = Table(
            title="Supported Formats",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Extension", style="bold")
        table.add_column("Format")
        table.add_column("Tag family", style="dim")

        for extension in supported_extensions():
            audio_format = detect(f"file{extension}")
            assert audio_format is not None
            table.add_row(extension, audio_format.name, audio_format.family.value)

        self._console.print(table)
