"""CLI command definitions for jsonfold."""

import click

from jsonfold.commands.comments import comments
from jsonfold.commands.config import config
from jsonfold.commands.copy import copy
from jsonfold.commands.fmt import fmt
from jsonfold.commands.tree import tree
from jsonfold.commands.view import view


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.pass_context
def cli(ctx, debug):
    """Format lenient JSON and browse it as a collapsible tree."""
    from jsonfold import setup_logging

    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


# Register all commands
cli.add_command(fmt)
cli.add_command(tree)
cli.add_command(comments)
cli.add_command(copy)
cli.add_command(view)
cli.add_command(config)

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
