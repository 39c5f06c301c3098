"""Settings management commands."""

import click

from jsonfold.commands.config.init import config_init
from jsonfold.commands.config.show import config_show


@click.group()
def config():
    """Settings management commands."""
    pass


config.add_command(config_init, name="init")
config.add_command(config_show, name="show")
