"""Error formatting utilities for consistent error messages.

This module provides helper functions for formatting error messages consistently
across the codebase. All user-facing errors should use these utilities.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Positional errors use structured format: 'line <n>, col <m>: <issue>'
- Avoid emojis in error messages (keep in status bars only)
- Include actionable hints where helpful
"""


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Args:
        message: The error message to format

    Returns:
        Formatted error message with 'Error: ' prefix

    Examples:
        >>> format_error("file not found")
        'Error: file not found'
    """
    return f"Error: {message}"


def format_position(lineno: int, colno: int, issue: str) -> str:
    """Format an error tied to a position in the source text.

    Examples:
        >>> format_position(3, 8, "Expecting value")
        'line 3, col 8: Expecting value'
    """
    return f"line {lineno}, col {colno}: {issue}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Args:
        message: The error message
        suggestion: Helpful suggestion or hint for the user

    Returns:
        Formatted error with suggestion

    Examples:
        >>> format_suggestion("settings file not found", "run 'jsonfold config init' to create one")
        "Error: settings file not found. Hint: run 'jsonfold config init' to create one"
    """
    return f"{format_error(message)}. Hint: {suggestion}"


def format_caret(source: str, lineno: int, colno: int) -> list[str]:
    """Return the offending source line and a caret under the column.

    Returns an empty list when the line number is out of range.
    """
    lines = source.split("\n")
    if not 1 <= lineno <= len(lines):
        return []
    return [lines[lineno - 1], " " * max(colno - 1, 0) + "^"]


__all__ = [
    "format_error",
    "format_position",
    "format_suggestion",
    "format_caret",
]
