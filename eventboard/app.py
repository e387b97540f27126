"""Application state, messages and the update step."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from eventboard.table import Table, TableMessage

APP_NAME = "MyApp"
SHOW = "Show"
QUIT = "Quit"
CLOSE_REQUESTED = "CloseRequested"

log = logging.getLogger(__name__)

_item_ids = itertools.count(1)


def _new_item_id() -> str:
    return f"menu-item-{next(_item_ids)}"


@dataclass(frozen=True)
class WindowEvent:
    """A window event, carried as its textual description."""

    description: str

    @property
    def is_close_request(self) -> bool:
        return self.description == CLOSE_REQUESTED


@dataclass(frozen=True)
class MenuEvent:
    """A click on a tray menu item, identified by the item's id."""

    id: str


@dataclass(frozen=True)
class ConfirmExit:
    pass


@dataclass(frozen=True)
class CancelExit:
    pass


@dataclass(frozen=True)
class TableEvent:
    """A message meant for the event table."""

    message: TableMessage


@dataclass(frozen=True)
class Noop:
    pass


Message = Union[WindowEvent, MenuEvent, ConfirmExit, CancelExit, TableEvent, Noop]


@dataclass
class TrayMenu:
    """The tray menu: a label-to-id map for its Show and Quit items."""

    items: dict[str, str] = field(
        default_factory=lambda: {SHOW: _new_item_id(), QUIT: _new_item_id()}
    )

    def handle(self, event: MenuEvent) -> Optional[str]:
        """React to a menu click; return the clicked label, or exit on Quit."""
        log.info("Event: %r", event)
        if event.id == self.items.get(SHOW):
            log.info("Show clicked")
            return SHOW
        if event.id == self.items.get(QUIT):
            log.info("Quit clicked")
            raise SystemExit(0)
        return None


@dataclass
class AppState:
    """Everything the application window shows."""

    show_confirm: bool = False
    main_table: Table = field(default_factory=Table)
    tray: TrayMenu = field(default_factory=TrayMenu)


def update(state: AppState, message: Message) -> None:
    """Apply a message to the application state."""
    if isinstance(message, WindowEvent):
        if message.is_close_request:
            state.show_confirm = True
        else:
            log.info("WindowEvent: %s", message.description)
            state.main_table.on_window_event_debug(message.description)
    elif isinstance(message, ConfirmExit):
        raise SystemExit(0)
    elif isinstance(message, MenuEvent):
        state.tray.handle(message)
    elif isinstance(message, TableEvent):
        state.main_table.update(message.message)
    elif isinstance(message, CancelExit):
        state.show_confirm = False
    elif isinstance(message, Noop):
        pass
    else:
        raise TypeError(f"unknown message: {message!r}")