"""Get path to doclinks config file."""

import os
from pathlib import Path


def get_config_path() -> Path:
    """Get path to config file based on DOCLINKS_HOME or default to ~/.doclinks."""
    home_env = os.environ.get("DOCLINKS_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve() / "config.json"
    return Path.home() / ".doclinks" / "config.json"
