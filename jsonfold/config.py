"""Settings loading and validation.

The settings file is itself JSON-ish: it goes through the same comment
scanner, normalizer and strict parser as documents typed into the viewer,
so ``// comments``, bare keys and trailing commas are all accepted.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from .document import build_document
from .layout import MAX_RATIO, MIN_RATIO, DEFAULT_RATIO


class ConfigError(Exception):
    """Raised when settings loading or parsing fails.

    Provides detailed error messages including line numbers,
    column positions, and caret indicators for syntax errors.
    """
    pass


DEFAULT_SETTINGS_TEXT = """{
    // Percentage of the width given to the input pane (10-90)
    split_ratio: 50,
    // Reparse on every edit; when false press F5 to format
    auto_format: true,
    // Show bound comments next to tree nodes
    show_comments: true,
    // Start every new document fully collapsed
    collapse_on_load: false,
}
"""


@dataclass
class Settings:
    """Viewer and CLI settings."""
    split_ratio: float = DEFAULT_RATIO
    auto_format: bool = True
    show_comments: bool = True
    collapse_on_load: bool = False

    def __post_init__(self):
        if isinstance(self.split_ratio, bool) or not isinstance(
            self.split_ratio, (int, float)
        ):
            raise ValueError("split_ratio must be a number")
        if not MIN_RATIO <= self.split_ratio <= MAX_RATIO:
            raise ValueError(
                f"split_ratio must be between {MIN_RATIO:g} and {MAX_RATIO:g}"
            )
        for flag in ("auto_format", "show_comments", "collapse_on_load"):
            if not isinstance(getattr(self, flag), bool):
                raise ValueError(f"{flag} must be a boolean")

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=4)


def validate_settings(data: dict) -> Settings:
    """Validate and convert a raw dict to Settings.

    Unknown keys are rejected so typos don't silently fall back to defaults.

    Raises:
        ConfigError: If validation fails
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Settings must be a JSON object, got {type(data).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings field(s): {', '.join(unknown)}")

    try:
        return Settings(**data)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def parse_settings_text(text: str) -> Settings:
    """Parse JSON-ish settings text into Settings.

    Blank text yields the defaults.

    Raises:
        ConfigError: On a syntax error or an invalid field
    """
    document = build_document(text)
    if document.is_empty:
        return Settings()
    if document.has_error:
        raise ConfigError(
            f"Settings syntax error at {document.error.format_with_context()}"
        )
    return validate_settings(document.value)


def load_settings(path: Path) -> Settings:
    """Load settings from ``path``; a missing file yields the defaults.

    Raises:
        ConfigError: If the file cannot be read or is invalid
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Settings()
    except PermissionError:
        raise ConfigError(f"Permission denied reading settings file: {path}")
    except UnicodeDecodeError:
        raise ConfigError(f"Settings file is not valid UTF-8: {path}")
    except OSError as e:
        raise ConfigError(f"Error reading settings file {path}: {e}")

    try:
        return parse_settings_text(text)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e


__all__ = [
    "ConfigError",
    "Settings",
    "DEFAULT_SETTINGS_TEXT",
    "validate_settings",
    "parse_settings_text",
    "load_settings",
]
