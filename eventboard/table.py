"""State and presentation logic of the event table."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from eventboard.events import Event, default_events

HEADER_HEIGHT = 36.0
ROW_HEIGHT = 36.0

_NUMBER_CHARS = frozenset("0123456789.-")
_MOVE_MARKERS = ("CursorMoved", "Moved(", "MovedPoint")
_PRESS_MARKERS = ("MouseInput", "MouseButton", "ButtonPressed", "Pressed")


class Tone(Enum):
    """How a cell's text is styled."""

    DEFAULT = "default"
    WARNING = "warning"
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class Cell:
    """A styled piece of text in the table."""

    text: str
    tone: Tone = Tone.DEFAULT


@dataclass(frozen=True)
class PaddingChanged:
    x: float
    y: float


@dataclass(frozen=True)
class SeparatorChanged:
    x: float
    y: float


@dataclass(frozen=True)
class ShowDetails:
    index: int


@dataclass(frozen=True)
class HideDetails:
    pass


@dataclass(frozen=True)
class HideContext:
    pass


TableMessage = Union[PaddingChanged, SeparatorChanged, ShowDetails, HideDetails, HideContext]


def _number_after(debug: str, key: str) -> Optional[float]:
    pos = debug.find(key)
    if pos < 0:
        return None
    tail = debug[pos + len(key):].lstrip()
    chars = []
    for ch in tail:
        if ch not in _NUMBER_CHARS:
            break
        chars.append(ch)
    try:
        return float("".join(chars))
    except ValueError:
        return None


def parse_cursor(debug: str) -> Optional[Tuple[float, float]]:
    """Read the first ``x:`` and ``y:`` numbers out of an event description."""
    x = _number_after(debug, "x:")
    y = _number_after(debug, "y:")
    if x is None or y is None:
        return None
    return (x, y)


@dataclass
class Table:
    """The event table with its layout settings, selection and context menu."""

    events: list[Event] = field(default_factory=default_events)
    padding: Tuple[float, float] = (10.0, 5.0)
    separator: Tuple[float, float] = (1.0, 1.0)
    selected: Optional[int] = None
    last_cursor: Optional[Tuple[float, float]] = None
    context_menu: Optional[Tuple[int, float, float]] = None

    def update(self, message: TableMessage) -> None:
        """Apply a table message to the state."""
        if isinstance(message, PaddingChanged):
            self.padding = (message.x, message.y)
        elif isinstance(message, SeparatorChanged):
            self.separator = (message.x, message.y)
        elif isinstance(message, ShowDetails):
            self.selected = message.index
        elif isinstance(message, HideDetails):
            self.selected = None
        elif isinstance(message, HideContext):
            self.context_menu = None
        else:
            raise TypeError(f"unknown table message: {message!r}")

    def on_window_event_debug(self, debug: str) -> None:
        """Track the cursor and open the context menu from a textual window event."""
        if any(marker in debug for marker in _MOVE_MARKERS):
            cursor = parse_cursor(debug)
            if cursor is not None:
                self.last_cursor = cursor

        pressed = any(marker in debug for marker in _PRESS_MARKERS)
        if pressed and "Right" in debug and self.last_cursor is not None:
            x, y = self.last_cursor
            if y > HEADER_HEIGHT:
                index = math.floor((y - HEADER_HEIGHT) / ROW_HEIGHT)
                if index < len(self.events):
                    self.context_menu = (index, x, y)

    def row_cells(self) -> list[Tuple[Cell, Cell, Cell, Cell]]:
        """Name, time, price and rating cells for every event, in order."""
        rows = []
        for event in self.events:
            minutes = event.minutes()
            time_cell = Cell(f"{minutes} min", Tone.WARNING if minutes > 90 else Tone.DEFAULT)
            if event.price > 0.0:
                price_cell = Cell(
                    f"${event.price:.2f}",
                    Tone.WARNING if event.price > 100.0 else Tone.DEFAULT,
                )
            else:
                price_cell = Cell("Free", Tone.SUCCESS)
            if event.rating > 4.7:
                rating_tone = Tone.SUCCESS
            elif event.rating < 2.0:
                rating_tone = Tone.DANGER
            else:
                rating_tone = Tone.DEFAULT
            rating_cell = Cell(f"{event.rating:.2f}", rating_tone)
            rows.append((Cell(event.name), time_cell, price_cell, rating_cell))
        return rows

    def details(self) -> Optional[Tuple[str, str, str, str]]:
        """Lines of the details dialog for the selected event, if any."""
        if self.selected is None or not 0 <= self.selected < len(self.events):
            return None
        event = self.events[self.selected]
        return (
            f"Name: {event.name}",
            f"Duration: {event.minutes()} min",
            f"Price: ${event.price:.2f}",
            f"Rating: {event.rating:.2f}",
        )