"""Tree command implementation."""

import click

from jsonfold.commands.utils import load_document_or_exit
from jsonfold.tree import CollapseState, render_text


@click.command()
@click.argument("file", required=False, type=click.Path())
@click.option(
    "--collapse",
    "-c",
    "collapse_paths",
    multiple=True,
    metavar="PATH",
    help="Collapse the container at PATH (e.g. root.items); repeatable",
)
@click.option("--collapse-all", is_flag=True, help="Collapse every container")
@click.option("--no-comments", is_flag=True, help="Hide recovered comments")
def tree(
    file: str | None,
    collapse_paths: tuple[str, ...],
    collapse_all: bool,
    no_comments: bool,
):
    """Print lenient JSON as an annotated tree.

    FILE: Path to the input file (default: stdin)
    """
    document = load_document_or_exit(file)
    if document.is_empty:
        return

    state = CollapseState(frozenset(collapse_paths))
    if collapse_all:
        state = state.collapse_all(document.value)

    comments = None if no_comments else document.comments
    click.echo(render_text(document.value, state, comments))
