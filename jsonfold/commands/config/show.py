"""Show settings command implementation."""

import click

from jsonfold.commands.utils import load_settings_or_exit
from jsonfold.paths import get_settings_path


@click.command(name="show")
def config_show():
    """Print the effective settings as strict JSON."""
    settings = load_settings_or_exit()
    click.echo(f"// {get_settings_path()}")
    click.echo(settings.to_json())
