"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from trackmeta.config.config import READ_WORKERS_DEFAULT


def test_read_workers_defaults(config_runtime_env: Path) -> None:
    _ = config_runtime_env

    import trackmeta.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.READ_WORKERS == READ_WORKERS_DEFAULT


@pytest.mark.parametrize(("configured", "expected"), [(8, 8), (0, READ_WORKERS_DEFAULT), (True, READ_WORKERS_DEFAULT), ("3", READ_WORKERS_DEFAULT)])
def test_read_workers_validation(config_runtime_env: Path, configured: object, expected: int) -> None:
    """Non-positive or non-integer values fall back to the default."""

    _ = config_runtime_env

    import trackmeta.config.config as config_module

    config_module.config.read_workers = configured  # type: ignore[assignment]

    import trackmeta.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.READ_WORKERS == expected
