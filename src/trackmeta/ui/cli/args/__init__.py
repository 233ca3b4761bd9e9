"""Command line argument handling package."""

from trackmeta.ui.cli.args.parser import ArgumentParser
from trackmeta.ui.cli.args.options import CLIArgs, FormatsArgs, ReadArgs

__all__ = ["ArgumentParser", "CLIArgs", "FormatsArgs", "ReadArgs"]
