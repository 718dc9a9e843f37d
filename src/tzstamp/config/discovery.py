"""Locate ``tzstamp.toml`` for :class:`~tzstamp.config.settings.TzstampSettings`.

The file holds conversion defaults (``[convert] default_timezone`` and
``use_milliseconds``).  ``TZSTAMP_CONFIG`` pins an explicit file; otherwise
the nearest ``tzstamp.toml`` at or above the working directory is used.
``--config`` bypasses discovery entirely (see ``TzstampSettings.from_cli``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tzstamp.toml"
CONFIG_ENV_VAR = "TZSTAMP_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies from *start* (default: cwd).

    A set ``TZSTAMP_CONFIG`` wins even when the file is missing, in which
    case no config applies and the code defaults are used.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
