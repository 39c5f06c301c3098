"""Clipboard export of the canonical strict JSON."""

import logging
from dataclasses import dataclass

import pyperclip

from .document import Document, export_document

_logging = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Raised when the system clipboard cannot be written."""
    pass


@dataclass(frozen=True)
class Notice:
    """Transient user-facing message produced by a copy action."""
    ok: bool
    message: str


def write_clipboard(text: str) -> None:
    """Write text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(str(e)) from e


def copy_document(document: Document, with_comments: bool = False) -> Notice:
    """Copy a parsed document to the clipboard and report the outcome.

    Failures never escape: they come back as a Notice with ``ok=False``
    and leave the document untouched.
    """
    if not document.is_parsed:
        return Notice(False, "Nothing to copy")

    text = export_document(document, with_comments=with_comments)
    try:
        write_clipboard(text)
    except ClipboardError as e:
        _logging.warning(f"Clipboard write failed: {e}")
        return Notice(False, "Copy failed")
    return Notice(True, "Copied to clipboard")


__all__ = ["ClipboardError", "Notice", "write_clipboard", "copy_document"]
