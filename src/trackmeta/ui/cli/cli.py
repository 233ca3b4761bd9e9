"""Command line interface for trackmeta."""

import sys
from typing import final

from trackmeta.platform.logging import logger
from trackmeta.ui.cli.args import ArgumentParser
from trackmeta.ui.cli.args.options import CLIArgs, FormatsArgs, ReadArgs
from trackmeta.ui.cli.commands import FormatsCommand, ReadCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ReadArgs):
                outcomes = ReadCommand(args).execute()
                if any(outcome.failed for outcome in outcomes):
                    sys.exit(1)
                return

            assert isinstance(args, FormatsArgs)
            FormatsCommand().execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing instead.
    """
    CommandProcessor.process_command()
    return 0
