"""Init settings command implementation."""

import sys

import click

from jsonfold import format_error
from jsonfold.config import DEFAULT_SETTINGS_TEXT
from jsonfold.paths import get_settings_path


@click.command(name="init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing settings file")
def config_init(force: bool):
    """Create a commented default settings file."""
    settings_path = get_settings_path(create=True)

    if settings_path.exists() and not force:
        click.echo(
            format_error(f"Settings file already exists: {settings_path}")
            + ". Use --force to overwrite.",
            err=True,
        )
        sys.exit(1)

    try:
        settings_path.write_text(DEFAULT_SETTINGS_TEXT, encoding="utf-8")
    except OSError as e:
        click.echo(format_error(f"Error writing settings: {e}"), err=True)
        sys.exit(1)

    click.echo(f"Created {settings_path}")
