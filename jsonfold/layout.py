"""Split-pane layout controller.

Holds the percentage of the available width given to the input pane and
drives pointer-based resizing of the divider. Listener registration for a
drag is a scoped resource: whatever ends the drag (pointer-up, an error in
a handler, or teardown of the owning view) releases every listener.
"""

import logging
from collections.abc import Callable
from contextlib import ExitStack
from typing import Final

_logging = logging.getLogger(__name__)

MIN_RATIO: Final[float] = 10.0
MAX_RATIO: Final[float] = 90.0
DEFAULT_RATIO: Final[float] = 50.0

POINTER_MOVE: Final[str] = "move"
POINTER_UP: Final[str] = "up"

PointerHandler = Callable[[float], None]
Measure = Callable[[], tuple[float, float]]


def clamp_ratio(ratio: float) -> float:
    """Clamp a split ratio to the allowed [10, 90] range.

    Examples:
        >>> clamp_ratio(5)
        10.0
        >>> clamp_ratio(55.5)
        55.5
        >>> clamp_ratio(120)
        90.0
    """
    return float(min(max(ratio, MIN_RATIO), MAX_RATIO))


class PointerHub:
    """Application-wide source of pointer events.

    Handlers receive the pointer's horizontal position. ``subscribe``
    returns a callable that removes the handler again.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[PointerHandler]] = {
            POINTER_MOVE: [],
            POINTER_UP: [],
        }

    def subscribe(self, event: str, handler: PointerHandler) -> Callable[[], None]:
        if event not in self._handlers:
            raise ValueError(f"Unknown pointer event: {event}")
        self._handlers[event].append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers[event]:
                self._handlers[event].remove(handler)

        return unsubscribe

    def listener_count(self, event: str | None = None) -> int:
        if event is not None:
            return len(self._handlers[event])
        return sum(len(handlers) for handlers in self._handlers.values())

    def dispatch(self, event: str, x: float) -> None:
        for handler in list(self._handlers[event]):
            handler(x)


class SplitLayout:
    """Pointer-driven split ratio controller.

    Args:
        hub: Source of pointer move/up events while a drag is active
        measure: Returns ``(left, width)`` of the container at call time
        ratio: Initial ratio, clamped to [10, 90]
        on_change: Called with the new ratio after every update

    Example:
        >>> hub = PointerHub()
        >>> layout = SplitLayout(hub, measure=lambda: (0.0, 200.0))
        >>> layout.begin_drag()
        >>> hub.dispatch("move", 50)
        >>> layout.ratio
        25.0
        >>> hub.dispatch("up", 50)
        >>> layout.is_resizing
        False
    """

    def __init__(
        self,
        hub: PointerHub,
        measure: Measure,
        ratio: float = DEFAULT_RATIO,
        on_change: Callable[[float], None] | None = None,
    ) -> None:
        self.hub = hub
        self.measure = measure
        self.ratio = clamp_ratio(ratio)
        self.on_change = on_change
        self._drag: ExitStack | None = None

    @property
    def is_resizing(self) -> bool:
        return self._drag is not None

    def begin_drag(self) -> None:
        """Start a drag; registers move/up listeners until the drag ends."""
        if self._drag is not None:
            return
        stack = ExitStack()
        stack.callback(self.hub.subscribe(POINTER_MOVE, self._on_move))
        stack.callback(self.hub.subscribe(POINTER_UP, self._on_up))
        self._drag = stack
        _logging.debug("Divider drag started")

    def end_drag(self) -> None:
        """End the drag and release its listeners. Safe to call repeatedly."""
        drag, self._drag = self._drag, None
        if drag is not None:
            drag.close()
            _logging.debug(f"Divider drag ended at ratio {self.ratio:.1f}")

    def close(self) -> None:
        """Teardown hook; releases listeners even in the middle of a drag."""
        self.end_drag()

    def set_ratio(self, ratio: float) -> None:
        self.ratio = clamp_ratio(ratio)
        if self.on_change is not None:
            self.on_change(self.ratio)

    def ratio_at(self, x: float) -> float:
        """Ratio for a pointer at horizontal position ``x``, clamped."""
        left, width = self.measure()
        if width <= 0:
            return self.ratio
        return clamp_ratio((x - left) / width * 100)

    def split(self, total: int) -> tuple[int, int]:
        """Divide ``total`` columns between the input and output panes."""
        left = round(total * self.ratio / 100)
        return left, total - left

    def _on_move(self, x: float) -> None:
        try:
            self.set_ratio(self.ratio_at(x))
        except Exception:
            self.end_drag()
            raise

    def _on_up(self, x: float) -> None:
        self.end_drag()


__all__ = [
    "MIN_RATIO",
    "MAX_RATIO",
    "DEFAULT_RATIO",
    "PointerHub",
    "SplitLayout",
    "clamp_ratio",
]
