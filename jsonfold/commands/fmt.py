"""Format command implementation."""

import sys
import uuid
from pathlib import Path

import click

from jsonfold import format_error
from jsonfold.commands.utils import load_document_or_exit
from jsonfold.document import export_document


@click.command()
@click.argument("file", required=False, type=click.Path())
@click.option(
    "--write",
    "-w",
    is_flag=True,
    help="Overwrite the file instead of printing to stdout",
)
def fmt(file: str | None, write: bool):
    """Format lenient JSON as strict JSON with a 4-space indent.

    Accepts single-quoted and backtick strings, bare keys, trailing commas
    and // comments. Comments are accepted on input but not preserved.

    FILE: Path to the input file (default: stdin)
    """
    if write and file in (None, "-"):
        click.echo(format_error("--write requires a FILE argument"), err=True)
        sys.exit(1)

    document = load_document_or_exit(file)
    if document.is_empty:
        return

    formatted = export_document(document)

    if not write:
        click.echo(formatted)
        return

    file_path = Path(file)
    # Write atomically with unique temp file name
    temp_path = file_path.with_suffix(f".tmp.{uuid.uuid4().hex[:8]}")
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(formatted)
            f.write("\n")
        temp_path.replace(file_path)
        click.echo(f"Formatted {file_path}")
    except OSError as e:
        if temp_path.exists():
            temp_path.unlink()
        click.echo(format_error(f"Error writing file: {e}"), err=True)
        sys.exit(1)
