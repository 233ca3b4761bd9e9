"""Command line interface package."""

from trackmeta.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
