"""Path-addressed tree model and collapse state.

Every node in a parsed value is addressed by a dot-joined path that starts
at ``root`` (``root.items.0.name``). Paths are derived from the current
tree on every render; state keyed by a path that no longer exists is simply
never matched.

Rendering, collapse-all and traversal use explicit work lists instead of
recursion so deeply nested input cannot exhaust the call stack.
"""

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final

ROOT_PATH: Final[str] = "root"
INDENT: Final[str] = "    "
ELLIPSIS: Final[str] = "..."

_EMPTY_COMMENTS: Final[Mapping[str, str]] = MappingProxyType({})


def join_path(path: str, segment: str | int) -> str:
    """Append a key or index segment to a path.

    Examples:
        >>> join_path("root", "items")
        'root.items'
        >>> join_path("root.items", 0)
        'root.items.0'
    """
    return f"{path}.{segment}"


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def iter_children(value: Any) -> list[tuple[str | None, str]]:
    """Return ``(key, segment)`` pairs for the children of a container.

    ``key`` is the object key for dict members and ``None`` for array
    elements; ``segment`` is what gets appended to the path.
    """
    if isinstance(value, dict):
        return [(key, key) for key in value]
    if isinstance(value, list):
        return [(None, str(i)) for i in range(len(value))]
    return []


def child_value(value: Any, key: str | None, segment: str) -> Any:
    if key is not None:
        return value[key]
    return value[int(segment)]


def walk(value: Any, path: str = ROOT_PATH) -> Iterator[tuple[str, str | None, Any]]:
    """Yield ``(path, key, node)`` for every node in pre-order.

    ``key`` is the object key when the node is an object member, else None.
    """
    stack: list[tuple[str, str | None, Any]] = [(path, None, value)]
    while stack:
        node_path, key, node = stack.pop()
        yield node_path, key, node
        children = iter_children(node)
        for child_key, segment in reversed(children):
            stack.append(
                (
                    join_path(node_path, segment),
                    child_key,
                    child_value(node, child_key, segment),
                )
            )


def format_literal(value: Any) -> str:
    """Type-tagged literal form of a scalar.

    Examples:
        >>> format_literal(None)
        'null'
        >>> format_literal(True)
        'true'
        >>> format_literal("a\\"b")
        '"a\\\\"b"'
    """
    return json.dumps(value, ensure_ascii=False)


def brackets(value: Any) -> tuple[str, str]:
    return ("[", "]") if isinstance(value, list) else ("{", "}")


@dataclass(frozen=True)
class RenderLine:
    """One rendered line of the tree.

    Attributes:
        path: Path of the node this line belongs to
        depth: Nesting depth (root is 0)
        kind: One of ``scalar``, ``empty``, ``open``, ``collapsed``, ``close``
        key: Object key prefix, if the node is an object member
        body: Literal or bracket text
        comma: Whether a trailing comma follows
        comment: Bound comment text shown as a cosmetic annotation
        toggle: Whether the line carries a collapse toggle for ``path``
    """

    path: str
    depth: int
    kind: str
    body: str
    key: str | None = None
    comma: bool = False
    comment: str | None = None
    toggle: bool = False

    @property
    def indent(self) -> str:
        return INDENT * self.depth

    @property
    def key_prefix(self) -> str:
        if self.key is None:
            return ""
        return f"{format_literal(self.key)}: "

    @property
    def collapsed(self) -> bool:
        return self.kind == "collapsed"

    @property
    def text(self) -> str:
        line = f"{self.indent}{self.key_prefix}{self.body}{',' if self.comma else ''}"
        if self.comment:
            line = f"{line}  {self.comment}"
        return line


def render_lines(
    value: Any,
    collapsed: "CollapseState | frozenset[str] | None" = None,
    comments: Mapping[str, str] | None = None,
) -> list[RenderLine]:
    """Render a parsed value into tree lines.

    A pure function of its arguments: the same value, collapse set and
    comment map always produce the same lines.

    Args:
        value: Parsed JSON value
        collapsed: Container paths to render in collapsed form
        comments: Path to comment mapping for cosmetic annotations

    Returns:
        Rendered lines in display order
    """
    collapsed_paths = _as_path_set(collapsed)
    comment_map = comments if comments is not None else _EMPTY_COMMENTS
    lines: list[RenderLine] = []

    # ("node", value, key, path, depth, is_last) or ("close", value, path, depth, is_last)
    stack: list[tuple] = [("node", value, None, ROOT_PATH, 0, True)]
    while stack:
        item = stack.pop()
        if item[0] == "close":
            _, node, path, depth, is_last = item
            lines.append(
                RenderLine(
                    path=path,
                    depth=depth,
                    kind="close",
                    body=brackets(node)[1],
                    comma=not is_last,
                )
            )
            continue

        _, node, key, path, depth, is_last = item
        comment = comment_map.get(path)

        if not is_container(node):
            lines.append(
                RenderLine(
                    path=path,
                    depth=depth,
                    kind="scalar",
                    key=key,
                    body=format_literal(node),
                    comma=not is_last,
                    comment=comment,
                )
            )
            continue

        open_bracket, close_bracket = brackets(node)
        if not node:
            lines.append(
                RenderLine(
                    path=path,
                    depth=depth,
                    kind="empty",
                    key=key,
                    body=f"{open_bracket}{close_bracket}",
                    comma=not is_last,
                    comment=comment,
                )
            )
            continue

        if path in collapsed_paths:
            lines.append(
                RenderLine(
                    path=path,
                    depth=depth,
                    kind="collapsed",
                    key=key,
                    body=f"{open_bracket}{ELLIPSIS}{close_bracket}",
                    comma=not is_last,
                    comment=comment,
                    toggle=True,
                )
            )
            continue

        lines.append(
            RenderLine(
                path=path,
                depth=depth,
                kind="open",
                key=key,
                body=open_bracket,
                comment=comment,
                toggle=True,
            )
        )
        stack.append(("close", node, path, depth, is_last))
        children = iter_children(node)
        last = len(children) - 1
        for i in range(last, -1, -1):
            child_key, segment = children[i]
            stack.append(
                (
                    "node",
                    child_value(node, child_key, segment),
                    child_key,
                    join_path(path, segment),
                    depth + 1,
                    i == last,
                )
            )

    return lines


def render_text(
    value: Any,
    collapsed: "CollapseState | frozenset[str] | None" = None,
    comments: Mapping[str, str] | None = None,
) -> str:
    """Render a parsed value as plain text, one line per tree line."""
    return "\n".join(line.text for line in render_lines(value, collapsed, comments))


def collect_container_paths(value: Any) -> frozenset[str]:
    """Collect the path of every container in the tree, empty ones included."""
    return frozenset(path for path, _, node in walk(value) if is_container(node))


def _as_path_set(collapsed: "CollapseState | frozenset[str] | None") -> frozenset[str]:
    if collapsed is None:
        return frozenset()
    if isinstance(collapsed, CollapseState):
        return collapsed.paths
    return frozenset(collapsed)


@dataclass(frozen=True)
class CollapseState:
    """Immutable set of collapsed container paths.

    Every update returns a new instance; a renderer holding an older
    instance keeps seeing a consistent snapshot.

    Example:
        >>> state = CollapseState().toggle("root.a")
        >>> "root.a" in state
        True
        >>> "root.a" in state.toggle("root.a")
        False
    """

    paths: frozenset[str] = field(default_factory=frozenset)

    def __contains__(self, path: object) -> bool:
        return path in self.paths

    def __len__(self) -> int:
        return len(self.paths)

    def is_collapsed(self, path: str) -> bool:
        return path in self.paths

    def toggle(self, path: str) -> "CollapseState":
        """Flip membership of ``path``. Toggling twice is a no-op."""
        if path in self.paths:
            return CollapseState(self.paths - {path})
        return CollapseState(self.paths | {path})

    def collapse_all(self, value: Any) -> "CollapseState":
        """Replace the set with every container path in ``value``."""
        return CollapseState(collect_container_paths(value))

    def expand_all(self) -> "CollapseState":
        return CollapseState()


__all__ = [
    "ROOT_PATH",
    "RenderLine",
    "CollapseState",
    "join_path",
    "walk",
    "format_literal",
    "render_lines",
    "render_text",
    "collect_container_paths",
]
