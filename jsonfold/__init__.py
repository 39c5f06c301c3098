"""Lenient JSON formatting with comment recovery and a collapsible tree view."""

import logging

import click

from .clipboard import ClipboardError, Notice, copy_document
from .comments import associate_comments
from .config import ConfigError, Settings, load_settings, parse_settings_text
from .document import (
    Document,
    DocumentStatus,
    build_document,
    export_document,
    to_strict_json,
)
from .errors import format_error, format_suggestion
from .layout import PointerHub, SplitLayout, clamp_ratio
from .normalizer import normalize
from .parser import ParseError, parse_strict
from .paths import get_config_dir, get_settings_path
from .scanner import ScanResult, scan_comments
from .tree import (
    ROOT_PATH,
    CollapseState,
    RenderLine,
    collect_container_paths,
    render_lines,
    render_text,
)

__version__ = "0.1.0"


class _ClickEchoHandler(logging.Handler):
    """Logging handler that writes through click.echo to the current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(debug: bool = False) -> None:
    """Configure the jsonfold logger; DEBUG when ``debug`` is set, WARNING otherwise."""
    logger = logging.getLogger(__name__)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(h, _ClickEchoHandler) for h in logger.handlers):
        handler = _ClickEchoHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)


__all__ = [
    "ClipboardError",
    "CollapseState",
    "ConfigError",
    "Document",
    "DocumentStatus",
    "Notice",
    "ParseError",
    "PointerHub",
    "ROOT_PATH",
    "RenderLine",
    "ScanResult",
    "Settings",
    "SplitLayout",
    "associate_comments",
    "build_document",
    "clamp_ratio",
    "collect_container_paths",
    "copy_document",
    "export_document",
    "format_error",
    "format_suggestion",
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "normalize",
    "parse_settings_text",
    "parse_strict",
    "render_lines",
    "render_text",
    "scan_comments",
    "setup_logging",
    "to_strict_json",
]
