"""Command execution package for CLI."""

from trackmeta.ui.cli.commands.formats import FormatsCommand
from trackmeta.ui.cli.commands.read import ReadCommand

__all__ = ["FormatsCommand", "ReadCommand"]
