"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from trackmeta.config.config import READ_WORKERS_DEFAULT, Config
from trackmeta.config.paths import default_config_path


def test_default_config(config_runtime_env: Path) -> None:
    """Loading without a file yields defaults and writes nothing."""

    _ = config_runtime_env
    config = Config.load()
    assert config.log_file is None
    assert config.read_workers == READ_WORKERS_DEFAULT
    assert not default_config_path().exists()


def test_save_load_toml(config_runtime_env: Path) -> None:
    """Saved values survive a reload through TOML."""

    _ = config_runtime_env
    original_config = Config(log_file=Path("/test/logs/trackmeta.log"), read_workers=8)
    written = original_config.save()
    assert written == default_config_path()

    Config.reset()
    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/trackmeta.log")
    assert loaded_config.read_workers == 8


def test_save_load_none_values(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    Config(log_file=None).save()

    Config.reset()
    assert Config.load().log_file is None


def test_empty_string_path_becomes_none() -> None:
    assert Config(log_file="  ").log_file is None  # type: ignore[arg-type]
    assert Config(log_file="/tmp/x.log").log_file == Path("/tmp/x.log")  # type: ignore[arg-type]


def test_singleton_behavior(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    config1 = Config.load()
    config2 = Config.load()
    assert config2 is config1


def test_toml_comments(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    Config(log_file=Path("/test/logs/a.log")).save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# trackmeta Configuration File" in content
    assert "# Log file path" in content
    assert 'log_file = "/test/logs/a.log"' in content
    assert "read_workers = 4" in content


def test_unknown_keys_are_ignored(config_runtime_env: Path, caplog: pytest.LogCaptureFixture) -> None:
    _ = config_runtime_env
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('read_workers = 2\nbase_path = "/music"\n', encoding="utf-8")

    Config.reset()
    loaded = Config.load()

    assert loaded.read_workers == 2
    assert "base_path" in caplog.text


def test_invalid_toml_raises(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text("read_workers = = 2\n", encoding="utf-8")

    Config.reset()
    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()
