"""Trailing comment scanner.

This module strips trailing ``//`` comments from JSON-ish text one line at
a time. Comments are not discarded: each one is recorded in a pool keyed by
its 0-based line index so it can later be bound to a structural path.

The scanner is quote-aware:
- Strings may be opened by ``"``, ``'`` or a backtick
- A string closes only on the same quote character that opened it
- A quote preceded by an odd run of backslashes is escaped
- ``//`` inside a string is ordinary text (``"http://x"`` stays intact)

Strings never span lines, so the state is reset at every line break.
"""

from dataclasses import dataclass, field
from typing import Final


# State constants for the per-line state machine
_NORMAL: Final[int] = 0
_IN_STRING: Final[int] = 1

QUOTE_CHARS: Final[str] = "\"'`"
COMMENT_MARKER: Final[str] = "//"


@dataclass
class ScanResult:
    """Output of a comment scan.

    Attributes:
        lines: Lines truncated at their comment marker
        comments: Comment text (marker included) keyed by line index
        original_lines: The untouched input lines
    """

    lines: list[str]
    comments: dict[int, str] = field(default_factory=dict)
    original_lines: list[str] = field(default_factory=list)

    @property
    def cleaned_text(self) -> str:
        """Truncated lines joined back together and trimmed."""
        return "\n".join(self.lines).strip()


class CommentScanner:
    """State machine that finds the start of a trailing comment in a line.

    Example:
        >>> scanner = CommentScanner()
        >>> scanner.find_comment('{"url": "http://x"}  // note')
        21
        >>> scanner.find_comment('{"url": "http://x"}')
        -1
    """

    def __init__(self) -> None:
        self.state: int = _NORMAL
        self.quote_char: str = ""

    def find_comment(self, line: str) -> int:
        """Return the index where a trailing comment starts, or -1.

        Args:
            line: A single line of source text (no newline)

        Returns:
            Index of the first ``/`` of the comment marker, or -1 if the
            line has no comment outside of a string
        """
        self.state = _NORMAL
        self.quote_char = ""
        n = len(line)

        for i, char in enumerate(line):
            if char in QUOTE_CHARS and not _is_escaped(line, i):
                self._process_quote(char)
            elif (
                self.state == _NORMAL
                and char == "/"
                and i + 1 < n
                and line[i + 1] == "/"
            ):
                return i
        return -1

    def _process_quote(self, char: str) -> None:
        """Open a string, or close it when the quote matches the opener."""
        if self.state == _NORMAL:
            self.state = _IN_STRING
            self.quote_char = char
        elif char == self.quote_char:
            self.state = _NORMAL
            self.quote_char = ""

    def scan(self, text: str) -> ScanResult:
        """Strip trailing comments from every line of ``text``.

        Args:
            text: Raw JSON-ish text

        Returns:
            ScanResult holding truncated lines, the comment pool and the
            original lines. Lines without a comment add no pool entry.
        """
        original_lines = text.split("\n")
        cleaned: list[str] = []
        comments: dict[int, str] = {}

        for idx, line in enumerate(original_lines):
            start = self.find_comment(line)
            if start == -1:
                cleaned.append(line)
                continue
            comments[idx] = line[start:]
            cleaned.append(line[:start])

        return ScanResult(
            lines=cleaned, comments=comments, original_lines=original_lines
        )


def _is_escaped(line: str, i: int) -> bool:
    """Check whether the character at ``i`` follows an unescaped backslash."""
    backslashes = 0
    j = i - 1
    while j >= 0 and line[j] == "\\":
        backslashes += 1
        j -= 1
    return backslashes % 2 == 1


def scan_comments(text: str) -> ScanResult:
    """Strip trailing ``//`` comments from JSON-ish text.

    This is the public interface for comment scanning. It creates an
    instance of CommentScanner and delegates to it.

    Examples:
        >>> result = scan_comments('{"a": 1, // first\\n"b": 2}')
        >>> result.comments
        {0: '// first'}
        >>> result.lines
        ['{"a": 1, ', '"b": 2}']
    """
    return CommentScanner().scan(text)


__all__ = ["CommentScanner", "ScanResult", "scan_comments"]
