"""Display package for CLI output."""

from trackmeta.ui.cli.display.metadata_table import MetadataDisplay

__all__ = ["MetadataDisplay"]
