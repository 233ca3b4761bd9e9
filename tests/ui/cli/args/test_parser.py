"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from trackmeta.config.settings import READ_WORKERS
from trackmeta.platform.logging import DEFAULT_LOG_FILE
from trackmeta.ui.cli.args import ArgumentParser, FormatsArgs, ReadArgs


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    read_args: Namespace = parser.parse_args(["read", "a.mp3", "b.flac"])
    assert read_args.command == "read"
    assert read_args.paths == ["a.mp3", "b.flac"]
    assert read_args.workers == READ_WORKERS
    assert not read_args.json_output

    formats_args: Namespace = parser.parse_args(["formats"])
    assert formats_args.command == "formats"


def test_verbose_and_quiet_are_exclusive() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["read", "a.mp3", "--verbose", "--quiet"])


def test_read_requires_a_path() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["read"])


def test_process_args_read(mocker: MockerFixture) -> None:
    """Process read arguments and coerce paths and logging levels."""

    mock_config = mocker.patch("trackmeta.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("trackmeta.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None

    args = ArgumentParser.process_args(["read", "one.mp3", "two.ogg", "--json", "--workers", "2"])

    assert isinstance(args, ReadArgs)
    assert args.paths == [Path("one.mp3"), Path("two.ogg")]
    assert args.json_output
    assert args.workers == 2
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


@pytest.mark.parametrize(
    ("flag", "level"),
    [("--verbose", logging.DEBUG), ("--quiet", logging.ERROR)],
)
def test_process_args_verbosity(mocker: MockerFixture, flag: str, level: int) -> None:
    mock_config = mocker.patch("trackmeta.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("trackmeta.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = Path("/var/log/custom.log")

    _ = ArgumentParser.process_args(["read", "one.mp3", flag])

    assert mock_setup_logger.call_args.kwargs["console_level"] == level
    assert mock_setup_logger.call_args.kwargs["log_file"] == Path("/var/log/custom.log")


def test_process_args_rejects_non_positive_workers(mocker: MockerFixture) -> None:
    mock_config = mocker.patch("trackmeta.ui.cli.args.parser.Config")
    _ = mocker.patch("trackmeta.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["read", "one.mp3", "--workers", "0"])

    assert excinfo.value.code == 1


def test_process_args_formats(mocker: MockerFixture) -> None:
    mock_config = mocker.patch("trackmeta.ui.cli.args.parser.Config")
    _ = mocker.patch("trackmeta.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None

    assert isinstance(ArgumentParser.process_args(["formats"]), FormatsArgs)
