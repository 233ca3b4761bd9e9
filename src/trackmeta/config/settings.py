"""Where: src/trackmeta/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the CLI without repeating file I/O.
"""

from __future__ import annotations

from trackmeta.config.config import READ_WORKERS_DEFAULT, config as app_config

_read_workers = getattr(app_config, "read_workers", READ_WORKERS_DEFAULT)
READ_WORKERS: int = (
    _read_workers
    if isinstance(_read_workers, int) and not isinstance(_read_workers, bool) and _read_workers > 0
    else READ_WORKERS_DEFAULT
)


__all__ = ["READ_WORKERS"]
