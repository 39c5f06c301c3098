"""Strict JSON parsing with structured errors."""

import json
import logging
from typing import Any

from .errors import format_caret, format_position

_logging = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when normalized text fails strict JSON parsing.

    Carries the underlying diagnostic message plus the line and column
    when the JSON decoder exposes them.
    """

    def __init__(
        self,
        msg: str,
        lineno: int | None = None,
        colno: int | None = None,
        source: str = "",
    ):
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        self.source = source
        super().__init__(self.describe())

    def describe(self) -> str:
        """One-line description including the position if known."""
        if self.lineno is None or self.colno is None:
            return self.msg
        return format_position(self.lineno, self.colno, self.msg)

    def format_with_context(self) -> str:
        """Multi-line description with the offending line and a caret."""
        parts = [self.describe()]
        if self.lineno is not None and self.colno is not None:
            parts.extend(format_caret(self.source, self.lineno, self.colno))
        return "\n".join(parts)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_strict(text: str) -> Any:
    """Parse normalized text as strict JSON.

    Python's decoder accepts ``NaN`` and ``Infinity``; those are rejected
    here so that only canonical JSON is accepted.

    Args:
        text: Normalized text

    Returns:
        The parsed value (dicts keep source key order)

    Raises:
        ParseError: If the text is not valid strict JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        _logging.debug(f"Strict parse failed: {e}")
        raise ParseError(e.msg, e.lineno, e.colno, source=text) from e
    except ValueError as e:
        raise ParseError(str(e), source=text) from e
    except RecursionError as e:
        raise ParseError("maximum nesting depth exceeded", source=text) from e


__all__ = ["ParseError", "parse_strict"]
