"""Shared config directory helper."""

import os
from pathlib import Path


def app_config_dir() -> Path:
    """Return the platform-specific application config directory."""
    location = os.environ.get("XDG_CONFIG_HOME")
    if location:
        return Path(location) / "ico_builder"
    return Path.home() / ".config" / "ico_builder"
