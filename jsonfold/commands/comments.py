"""Comments command implementation."""

import click

from jsonfold.commands.utils import load_document_or_exit


@click.command()
@click.argument("file", required=False, type=click.Path())
def comments(file: str | None):
    """List recovered comments as PATH<TAB>COMMENT lines.

    FILE: Path to the input file (default: stdin)
    """
    document = load_document_or_exit(file)
    for path, comment in document.comments.items():
        click.echo(f"{path}\t{comment}")
