"""Where the configuration file and rotating log live.

Both default to folders beside the project's ``pyproject.toml``; the
configuration file can be moved with ``TRACKMETA_CONFIG``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "TRACKMETA_CONFIG"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first directory holding a project marker.

    Falls back to the current working directory when no ``pyproject.toml``
    or ``.git`` is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the TOML config location, honouring ``TRACKMETA_CONFIG``."""

    mapping = env if env is not None else os.environ
    override = (mapping.get(CONFIG_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / "trackmeta.log"


__all__ = [
    "CONFIG_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
