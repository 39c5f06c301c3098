"""Settings path helpers for jsonfold."""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """Return XDG-compliant config directory: ~/.config/jsonfold"""
    return Path.home() / ".config" / "jsonfold"


def get_settings_path(create: bool = False) -> Path:
    """Return path to the user settings file.

    Priority:
    1. JSONFOLD_CONFIG environment variable (if set)
    2. ~/.config/jsonfold/settings.json (default XDG location)

    Args:
        create: If True, create the parent directory if missing

    Returns:
        Path to settings file
    """
    if "JSONFOLD_CONFIG" in os.environ:
        settings_path = Path(os.environ["JSONFOLD_CONFIG"])
    else:
        settings_path = get_config_dir() / "settings.json"

    if create:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
    return settings_path
