"""Heuristic comment-to-path association.

Comments have no place in the JSON grammar, so after parsing they are
matched back onto the tree by key name: a comment is bound to the first
object member (in pre-order) whose key appears quoted on the comment's
original source line. Each line is consumed at most once.

The match is a substring test against raw source lines, not a real
binding. Duplicate key names and several keys on one line resolve to the
first candidate in traversal order.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .tree import walk

_logging = logging.getLogger(__name__)


def _line_mentions_key(line: str, key: str) -> bool:
    return f'"{key}"' in line or f"'{key}'" in line


def associate_comments(
    value: Any,
    comments: Mapping[int, str],
    original_lines: list[str],
) -> Mapping[str, str]:
    """Bind pooled comments to structural paths.

    Args:
        value: Successfully parsed value
        comments: Comment pool keyed by 0-based line index
        original_lines: Source lines before comment truncation

    Returns:
        Read-only mapping of path to comment text

    Example:
        >>> text = '{"a": 1, // first\\n"b": 2 // second\\n}'
        >>> lines = text.split("\\n")
        >>> dict(associate_comments({"a": 1, "b": 2}, {0: "// first", 1: "// second"}, lines))
        {'root.a': '// first', 'root.b': '// second'}
    """
    pool = dict(sorted(comments.items()))
    bound: dict[str, str] = {}

    # walk() is pre-order, so a key is matched before any key nested under it
    for path, key, _ in walk(value):
        if key is None or not pool:
            continue
        for idx, comment in pool.items():
            if _line_mentions_key(original_lines[idx], key):
                bound[path] = comment
                del pool[idx]
                break

    if pool:
        _logging.debug(f"Dropped {len(pool)} unmatched comment(s) on lines {list(pool)}")

    return MappingProxyType(bound)


__all__ = ["associate_comments"]
