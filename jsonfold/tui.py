"""Interactive two-pane viewer.

Left pane: JSON-ish input. Right pane: the rendered, collapsible tree.
A divider between them can be dragged with the mouse to resize the panes.

Keys:
- Tab switches focus between the input and the tree
- Up/Down move the tree cursor, Enter/Space toggle the container under it
- F2 structured input, F5 format now, F6 collapse all, F7 expand all
- F8 copy JSON, F9 copy "with comments", Ctrl-Q quit
"""

import logging
import sys
from collections.abc import Callable

from prompt_toolkit.application import Application
from prompt_toolkit.application.current import get_app
from prompt_toolkit.data_structures import Point
from prompt_toolkit.filters import Condition, has_focus
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import (
    ConditionalContainer,
    DynamicContainer,
    Float,
    FloatContainer,
    HSplit,
    Layout,
    VSplit,
    Window,
)
from prompt_toolkit.layout.controls import FormattedTextControl, UIContent, UIControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.mouse_events import MouseEvent, MouseEventType
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import TextArea

from .clipboard import Notice, copy_document
from .config import Settings
from .document import Document, build_document
from .layout import POINTER_MOVE, POINTER_UP, PointerHub, SplitLayout
from .tree import CollapseState, RenderLine, render_lines

_logging = logging.getLogger(__name__)

BRACKET_STYLES = [
    "class:bracket.0",
    "class:bracket.1",
    "class:bracket.2",
    "class:bracket.3",
    "class:bracket.4",
]

TOGGLE_COLLAPSED = "▶ "
TOGGLE_EXPANDED = "▼ "
TOGGLE_NONE = "  "

VIEWER_STYLE = Style.from_dict(
    {
        "bracket.0": "fg:#e5c07b",
        "bracket.1": "fg:#c678dd",
        "bracket.2": "fg:#61afef",
        "bracket.3": "fg:#d19a66",
        "bracket.4": "fg:#98c379",
        "key": "fg:#e06c75",
        "string": "fg:#98c379",
        "number": "fg:#d19a66",
        "keyword": "fg:#61afef italic",
        "comment": "fg:#5c6370 italic",
        "toggle": "fg:#888888",
        "cursor-line": "reverse",
        "error": "fg:#e06c75",
        "placeholder": "fg:#5c6370 italic",
        "header": "bg:#1e2a3d fg:#aaaaaa bold",
        "divider": "fg:#444444",
        "status": "bg:#1e2a3d fg:#aaaaaa",
        "status.ok": "bg:#1e2a3d fg:#98c379",
        "status.fail": "bg:#1e2a3d fg:#e06c75",
    }
)


class ViewerState:
    """State behind the viewer, independent of any terminal.

    The document is replaced wholesale on every reformat; the collapse
    state is an immutable value replaced on every toggle.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        copier: Callable[[Document, bool], Notice] = copy_document,
    ):
        self.settings = settings or Settings()
        self.copier = copier
        self.text = ""
        self.document = build_document("")
        self.collapse = CollapseState()
        self.cursor = 0
        self.notice: Notice | None = None
        self.structured_input = False
        self.format_pending = False

    def set_text(self, text: str, pasted: bool = False) -> None:
        """Record new input text; reparse unless it was pasted or auto-format is off."""
        self.text = text
        if pasted or not self.settings.auto_format:
            self.format_pending = bool(text.strip())
            return
        self.reformat()

    def reformat(self) -> None:
        self.document = build_document(self.text)
        self.format_pending = False
        if self.document.is_parsed:
            if self.settings.collapse_on_load:
                self.collapse = self.collapse.collapse_all(self.document.value)
        else:
            self.structured_input = False
        self._clamp_cursor()

    def lines(self) -> list[RenderLine]:
        if not self.document.is_parsed:
            return []
        comments = self.document.comments if self.settings.show_comments else None
        return render_lines(self.document.value, self.collapse, comments)

    def toggle(self, path: str) -> None:
        self.collapse = self.collapse.toggle(path)
        self._clamp_cursor()

    def toggle_at_cursor(self) -> None:
        lines = self.lines()
        if 0 <= self.cursor < len(lines) and lines[self.cursor].toggle:
            self.toggle(lines[self.cursor].path)

    def collapse_all(self) -> None:
        if self.document.is_parsed:
            self.collapse = self.collapse.collapse_all(self.document.value)
            self._clamp_cursor()

    def expand_all(self) -> None:
        self.collapse = self.collapse.expand_all()

    def move_cursor(self, delta: int) -> None:
        self.cursor += delta
        self._clamp_cursor()

    def toggle_structured_input(self) -> None:
        self.structured_input = self.document.is_parsed and not self.structured_input

    def copy(self, with_comments: bool = False) -> None:
        self.notice = self.copier(self.document, with_comments)

    def _clamp_cursor(self) -> None:
        count = len(self.lines())
        self.cursor = min(max(self.cursor, 0), max(count - 1, 0))


def _body_style(line: RenderLine) -> str:
    if line.kind == "scalar":
        if line.body.startswith('"'):
            return "class:string"
        if line.body in ("null", "true", "false"):
            return "class:keyword"
        return "class:number"
    return BRACKET_STYLES[line.depth % len(BRACKET_STYLES)]


def tree_fragments(
    lines: list[RenderLine],
    cursor: int | None = None,
    on_toggle: Callable[[str], None] | None = None,
) -> list[tuple]:
    """Convert rendered lines to prompt_toolkit formatted text.

    Toggle glyphs get a mouse handler that calls ``on_toggle`` with the
    line's path on click.
    """
    fragments: list[tuple] = []
    for i, line in enumerate(lines):
        line_style = "class:cursor-line " if i == cursor else ""

        if line.toggle:
            glyph = TOGGLE_COLLAPSED if line.collapsed else TOGGLE_EXPANDED
            if on_toggle is not None:
                fragments.append(
                    (line_style + "class:toggle", glyph, _toggle_handler(on_toggle, line.path))
                )
            else:
                fragments.append((line_style + "class:toggle", glyph))
        else:
            fragments.append((line_style, TOGGLE_NONE))

        fragments.append((line_style, line.indent))
        if line.key is not None:
            fragments.append((line_style + "class:key", line.key_prefix))
        fragments.append((line_style + _body_style(line), line.body))
        if line.comma:
            fragments.append((line_style, ","))
        if line.comment:
            fragments.append((line_style + "class:comment", f"  {line.comment}"))
        fragments.append(("", "\n"))
    return fragments


def _toggle_handler(on_toggle: Callable[[str], None], path: str):
    def handler(mouse_event: MouseEvent):
        if mouse_event.event_type == MouseEventType.MOUSE_UP:
            on_toggle(path)
            return None
        return NotImplemented

    return handler


class _DividerControl(UIControl):
    """Vertical divider; a mouse press on it starts a resize drag."""

    def __init__(self, split: SplitLayout):
        self.split = split

    def create_content(self, width: int, height: int) -> UIContent:
        return UIContent(
            get_line=lambda i: [("class:divider", "│")], line_count=height
        )

    def mouse_handler(self, mouse_event: MouseEvent):
        if mouse_event.event_type == MouseEventType.MOUSE_DOWN:
            self.split.begin_drag()
            return None
        return NotImplemented


class _PointerCaptureControl(UIControl):
    """Transparent full-screen surface that forwards pointer events during a drag."""

    def __init__(self, hub: PointerHub):
        self.hub = hub

    def create_content(self, width: int, height: int) -> UIContent:
        return UIContent(get_line=lambda i: [], line_count=height)

    def mouse_handler(self, mouse_event: MouseEvent):
        x = mouse_event.position.x
        if mouse_event.event_type == MouseEventType.MOUSE_MOVE:
            self.hub.dispatch(POINTER_MOVE, x)
        elif mouse_event.event_type == MouseEventType.MOUSE_UP:
            self.hub.dispatch(POINTER_UP, x)
        return None


def _status_fragments(state: ViewerState, split: SplitLayout) -> list[tuple]:
    tokens: list[tuple] = []
    if state.notice is not None:
        style = "class:status.ok" if state.notice.ok else "class:status.fail"
        tokens.append((style, f" {state.notice.message} "))
    elif state.format_pending:
        tokens.append(("class:status", " Press F5 to format "))
    tokens.append(
        (
            "class:status",
            f" {split.ratio:.0f}% | Tab focus  F2 structured  F5 format  "
            "F6 collapse  F7 expand  F8 copy  F9 copy+comments  ^Q quit",
        )
    )
    return tokens


def build_application(
    state: ViewerState, hub: PointerHub | None = None
) -> tuple[Application, SplitLayout]:
    """Assemble the viewer application around ``state``.

    Returns the application and its layout controller; the caller must
    close the controller when the application exits.
    """
    hub = hub or PointerHub()
    split = SplitLayout(
        hub,
        measure=lambda: (0.0, float(get_app().output.get_size().columns)),
        ratio=state.settings.split_ratio,
        on_change=lambda _ratio: get_app().invalidate(),
    )

    def left_width() -> Dimension:
        columns = get_app().output.get_size().columns
        return Dimension.exact(max(split.split(columns - 1)[0], 1))

    input_area = TextArea(
        text=state.text,
        multiline=True,
        scrollbar=True,
        width=left_width,
    )

    pasting = [False]

    def on_text_changed(buffer) -> None:
        state.notice = None
        state.set_text(buffer.text, pasted=pasting[0])

    input_area.buffer.on_text_changed += on_text_changed

    tree_kb = KeyBindings()

    @tree_kb.add("up")
    def _(event):
        state.move_cursor(-1)

    @tree_kb.add("down")
    def _(event):
        state.move_cursor(1)

    @tree_kb.add("enter")
    @tree_kb.add("space")
    def _(event):
        state.toggle_at_cursor()

    def get_tree_text():
        return tree_fragments(state.lines(), state.cursor, state.toggle)

    def make_tree_window(width=None) -> Window:
        return Window(
            content=FormattedTextControl(
                get_tree_text,
                focusable=True,
                key_bindings=tree_kb,
                get_cursor_position=lambda: Point(0, state.cursor),
            ),
            width=width,
            wrap_lines=False,
        )

    output_tree = make_tree_window()
    structured_tree = make_tree_window(width=left_width)

    error_window = Window(
        content=FormattedTextControl(
            lambda: [("class:error", state.document.error.format_with_context())]
            if state.document.error
            else []
        ),
        wrap_lines=True,
    )
    placeholder = Window(
        content=FormattedTextControl([("class:placeholder", "Waiting for input...")])
    )

    def left_body():
        if state.structured_input and state.document.is_parsed:
            return structured_tree
        return input_area

    def right_body():
        if state.document.has_error:
            return error_window
        if state.document.is_parsed:
            return output_tree
        return placeholder

    body = VSplit(
        [
            HSplit(
                [
                    Window(
                        FormattedTextControl(
                            [("class:header", " Input (quotes, bare keys, // comments)")]
                        ),
                        height=1,
                        style="class:header",
                        width=left_width,
                    ),
                    DynamicContainer(left_body),
                ]
            ),
            Window(content=_DividerControl(split), width=1),
            HSplit(
                [
                    Window(
                        FormattedTextControl(
                            [("class:header", " Formatted (F6 collapse all, F7 expand all)")]
                        ),
                        height=1,
                        style="class:header",
                    ),
                    DynamicContainer(right_body),
                ]
            ),
        ]
    )

    root = FloatContainer(
        content=HSplit(
            [
                body,
                Window(
                    content=FormattedTextControl(lambda: _status_fragments(state, split)),
                    height=1,
                    style="class:status",
                ),
            ]
        ),
        floats=[
            Float(
                content=ConditionalContainer(
                    content=Window(content=_PointerCaptureControl(hub)),
                    filter=Condition(lambda: split.is_resizing),
                ),
                top=0,
                bottom=0,
                left=0,
                right=0,
                transparent=True,
            )
        ],
    )

    kb = KeyBindings()

    @kb.add("c-q")
    @kb.add("c-c")
    def _(event):
        event.app.exit()

    @kb.add("tab")
    def _(event):
        event.app.layout.focus_next()

    @kb.add(Keys.BracketedPaste, filter=has_focus(input_area.buffer))
    def _(event):
        data = event.data.replace("\r\n", "\n").replace("\r", "\n")
        pasting[0] = True
        try:
            event.current_buffer.insert_text(data)
        finally:
            pasting[0] = False

    @kb.add("f2")
    def _(event):
        state.toggle_structured_input()

    @kb.add("f5")
    def _(event):
        state.reformat()

    @kb.add("f6")
    def _(event):
        state.collapse_all()

    @kb.add("f7")
    def _(event):
        state.expand_all()

    @kb.add("f8")
    def _(event):
        state.copy(with_comments=False)

    @kb.add("f9")
    def _(event):
        state.copy(with_comments=True)

    app = Application(
        layout=Layout(root, focused_element=input_area),
        key_bindings=kb,
        style=VIEWER_STYLE,
        full_screen=True,
        mouse_support=True,
    )
    return app, split


def run_viewer(text: str = "", settings: Settings | None = None) -> None:
    """Open the interactive viewer on ``text``.

    Raises:
        RuntimeError: If not running in a TTY
    """
    if not sys.stdin.isatty():
        raise RuntimeError("Interactive viewer requires a TTY")

    state = ViewerState(settings)
    state.set_text(text)
    app, split = build_application(state)
    try:
        app.run()
    finally:
        split.close()
        _logging.debug("Viewer closed")


__all__ = [
    "ViewerState",
    "build_application",
    "run_viewer",
    "tree_fragments",
    "VIEWER_STYLE",
]
