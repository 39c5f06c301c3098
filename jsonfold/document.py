"""Document pipeline: scan, normalize, parse and associate comments.

A Document is derived from raw text and never patched. Every text change
produces a brand new Document through ``build_document``.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .comments import associate_comments
from .normalizer import normalize
from .parser import ParseError, parse_strict
from .scanner import scan_comments

_logging = logging.getLogger(__name__)

EXPORT_INDENT = 4

_NO_COMMENTS: Mapping[str, str] = MappingProxyType({})


class DocumentStatus(Enum):
    EMPTY = "empty"
    PARSED = "parsed"
    ERROR = "error"


@dataclass(frozen=True)
class Document:
    """Result of running the pipeline over one version of the input text.

    Attributes:
        raw_text: Text exactly as typed
        normalized_text: Text handed to the strict parser ("" when empty)
        status: EMPTY for blank input, PARSED or ERROR otherwise
        value: Parsed value (only meaningful when status is PARSED)
        error: The parse failure when status is ERROR
        comments: Path to comment mapping (empty unless PARSED)
    """

    raw_text: str
    normalized_text: str = ""
    status: DocumentStatus = DocumentStatus.EMPTY
    value: Any = None
    error: ParseError | None = None
    comments: Mapping[str, str] = field(default_factory=lambda: _NO_COMMENTS)

    @property
    def is_empty(self) -> bool:
        return self.status == DocumentStatus.EMPTY

    @property
    def is_parsed(self) -> bool:
        return self.status == DocumentStatus.PARSED

    @property
    def has_error(self) -> bool:
        return self.status == DocumentStatus.ERROR


def build_document(raw_text: str) -> Document:
    """Run the full pipeline over ``raw_text``.

    Blank input yields an EMPTY document, never an error. A parse failure
    yields an ERROR document with no value and no comments.

    Args:
        raw_text: JSON-ish text as typed by the user

    Returns:
        A fresh Document
    """
    if not raw_text.strip():
        return Document(raw_text=raw_text)

    scan = scan_comments(raw_text)
    normalized = normalize(scan.cleaned_text)

    try:
        value = parse_strict(normalized)
    except ParseError as e:
        _logging.debug(f"Document rejected: {e}")
        return Document(
            raw_text=raw_text,
            normalized_text=normalized,
            status=DocumentStatus.ERROR,
            error=e,
        )

    comments = associate_comments(value, scan.comments, scan.original_lines)
    _logging.debug(
        f"Parsed document: {len(scan.comments)} comment(s) found, {len(comments)} bound"
    )
    return Document(
        raw_text=raw_text,
        normalized_text=normalized,
        status=DocumentStatus.PARSED,
        value=value,
        comments=comments,
    )


def to_strict_json(value: Any) -> str:
    """Serialize a value as canonical strict JSON (4-space indent, source key order)."""
    return json.dumps(value, indent=EXPORT_INDENT, ensure_ascii=False)


def export_document(document: Document, with_comments: bool = False) -> str:
    """Export a parsed document as strict JSON.

    ``with_comments`` is accepted for interface parity with the viewer's
    two copy actions, but no comment-embedding format exists yet, so both
    modes produce the same text.

    Raises:
        ValueError: If the document was not parsed successfully
    """
    if not document.is_parsed:
        raise ValueError("Only a successfully parsed document can be exported")
    # TODO: embed bound comments once a JSONC output format is agreed on
    return to_strict_json(document.value)


__all__ = [
    "Document",
    "DocumentStatus",
    "build_document",
    "export_document",
    "to_strict_json",
]
