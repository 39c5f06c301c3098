"""Copy command implementation."""

import sys

import click

from jsonfold import format_error
from jsonfold.clipboard import copy_document
from jsonfold.commands.utils import load_document_or_exit


def _ask_with_comments() -> bool | None:
    """Ask which export mode to use; None if the user cancels."""
    try:
        import questionary
    except ImportError:
        return False

    try:
        choice = questionary.select(
            "Copy as:",
            choices=[
                questionary.Choice(title="Plain JSON", value=False),
                questionary.Choice(title="JSON with comments", value=True),
            ],
        ).ask()
    except KeyboardInterrupt:
        return None
    return choice


@click.command()
@click.argument("file", required=False, type=click.Path())
@click.option(
    "--with-comments/--plain",
    "with_comments",
    default=None,
    help="Export mode (asked interactively when omitted on a TTY)",
)
def copy(file: str | None, with_comments: bool | None):
    """Copy lenient JSON to the clipboard as strict JSON.

    Both export modes currently produce the same strict JSON.

    FILE: Path to the input file (default: stdin)
    """
    document = load_document_or_exit(file)
    if document.is_empty:
        click.echo(format_error("Nothing to copy: input is empty"), err=True)
        sys.exit(1)

    if with_comments is None:
        if file not in (None, "-") and sys.stdin.isatty():
            with_comments = _ask_with_comments()
            if with_comments is None:
                click.echo("Cancelled.")
                return
        else:
            with_comments = False

    notice = copy_document(document, with_comments=with_comments)
    if not notice.ok:
        click.echo(format_error(notice.message), err=True)
        sys.exit(1)
    click.echo(notice.message)
