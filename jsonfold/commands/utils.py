"""Shared utility functions for commands."""

import sys

import click

from jsonfold import format_error, format_suggestion
from jsonfold.config import ConfigError, Settings, load_settings
from jsonfold.document import Document, build_document
from jsonfold.paths import get_settings_path


def read_source(file: str | None) -> str:
    """Read input text from ``file``, or from stdin when omitted or ``-``."""
    if file is None or file == "-":
        return click.get_text_stream("stdin").read()
    try:
        with open(file, encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        click.echo(format_error(f"File not found: {file}"), err=True)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(format_error(f"Error reading {file}: {e}"), err=True)
        sys.exit(1)


def load_document_or_exit(file: str | None) -> Document:
    """Build a document from ``file``; exit with status 1 on a parse error.

    Empty input is returned as an EMPTY document, not treated as an error.
    """
    document = build_document(read_source(file))
    if document.has_error:
        click.echo(format_error(document.error.format_with_context()), err=True)
        sys.exit(1)
    return document


def load_settings_or_exit() -> Settings:
    try:
        return load_settings(get_settings_path())
    except ConfigError as e:
        click.echo(
            format_suggestion(str(e), "run 'jsonfold config init --force' to reset it"),
            err=True,
        )
        sys.exit(1)
