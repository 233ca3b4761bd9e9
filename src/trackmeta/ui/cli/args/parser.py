"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from trackmeta.config.config import Config
from trackmeta.config.settings import READ_WORKERS
from trackmeta.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from trackmeta.ui.cli.args.options import CLIArgs, FormatsArgs, ReadArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="trackmeta",
            description="trackmeta - Read normalized tag metadata from audio files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        read_parser = subparsers.add_parser(
            "read",
            help="Read and print the metadata of one or more audio files",
        )
        _ = read_parser.add_argument(
            "paths",
            type=str,
            nargs="+",
            help="Audio files to read",
            metavar="PATH",
        )
        _ = read_parser.add_argument(
            "--json",
            action="store_true",
            dest="json_output",
            help="Print one JSON document instead of tables",
        )
        _ = read_parser.add_argument(
            "--workers",
            type=int,
            default=READ_WORKERS,
            metavar="N",
            help=f"Number of files read concurrently (default: {READ_WORKERS})",
        )
        verbosity = read_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug diagnostics from the readers",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        _ = subparsers.add_parser(
            "formats",
            help="List supported file extensions and their tag families",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "read":
            return ArgumentParser._process_read(parsed_args)

        if command == "formats":
            return FormatsArgs(command="formats")

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_read(parsed_args: argparse.Namespace) -> ReadArgs:
        workers: int = parsed_args.workers
        if workers <= 0:
            logger.error("Workers must be a positive integer; received %s", workers)
            sys.exit(1)

        return ReadArgs(
            command="read",
            paths=[Path(raw) for raw in parsed_args.paths],
            json_output=parsed_args.json_output,
            workers=workers,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
