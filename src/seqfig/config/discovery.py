"""Config file discovery.

Walk-up finder locates seqfig.toml next to (or above) the diagrams being
rendered, similar to how git finds .git/. The SEQFIG_CONFIG env var and the
--config CLI flag bypass the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "seqfig.toml"
CONFIG_ENV_VAR = "SEQFIG_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for seqfig.toml.

    Returns the path to the config file, or None if not found. A set but
    missing SEQFIG_CONFIG disables discovery rather than falling back.
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
