"""View command implementation."""

import sys

import click

from jsonfold import format_error
from jsonfold.commands.utils import load_settings_or_exit, read_source


@click.command()
@click.argument("file", required=False, type=click.Path())
def view(file: str | None):
    """Open the interactive two-pane viewer.

    FILE: Optional file to load into the input pane
    """
    from jsonfold.tui import run_viewer

    settings = load_settings_or_exit()
    text = read_source(file) if file is not None else ""

    try:
        run_viewer(text, settings)
    except RuntimeError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
