"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ReadArgs:
    """Command line arguments for the ``read`` subcommand."""

    command: Literal["read"]
    paths: list[Path]
    json_output: bool
    workers: int
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class FormatsArgs:
    """Command line arguments for the ``formats`` subcommand."""

    command: Literal["formats"]


CLIArgs = ReadArgs | FormatsArgs

__all__ = ["CLIArgs", "FormatsArgs", "ReadArgs"]
