"""Tk window that shows the event table."""

from __future__ import annotations

import argparse
import logging
import queue
import tkinter as tk
from typing import Callable, Optional, Tuple

from eventboard.app import (
    APP_NAME,
    CLOSE_REQUESTED,
    QUIT,
    SHOW,
    AppState,
    CancelExit,
    ConfirmExit,
    MenuEvent,
    Message,
    Noop,
    TableEvent,
    WindowEvent,
    update,
)
from eventboard.table import (
    HideContext,
    HideDetails,
    PaddingChanged,
    SeparatorChanged,
    ShowDetails,
    TableMessage,
    Tone,
)

POLL_MS = 100

_BG = "#202225"
_PANEL = "#2f3136"
_FG = "#e0e0e0"
_TONE_COLOURS = {
    Tone.DEFAULT: _FG,
    Tone.WARNING: "#e0b040",
    Tone.SUCCESS: "#50c878",
    Tone.DANGER: "#e05050",
}
_MONO = ("TkFixedFont", 10)


def format_px(value: float) -> str:
    """Slider value as a whole number of pixels."""
    return f"{value:.0f}px"


def menu_offset(x: float) -> int:
    """Left padding that places the context menu near the cursor column."""
    if x > 0.0:
        return int(min(max(x - 100.0, 0.0), 600.0))
    return 0


class App:
    """The main window, driven by the messages of the application."""

    def __init__(self, state: Optional[AppState] = None) -> None:
        self.state = state if state is not None else AppState()
        self._tray_events: "queue.Queue[MenuEvent]" = queue.Queue()
        self._root: Optional[tk.Tk] = None
        self._body: Optional[tk.Frame] = None
        self._rendered_key: Optional[tuple] = None

    def run(self) -> int:
        """Open the window and run until the application exits."""
        root = tk.Tk()
        root.title(APP_NAME)
        root.configure(bg=_BG)
        root.protocol("WM_DELETE_WINDOW", lambda: self._dispatch(WindowEvent(CLOSE_REQUESTED)))

        menubar = tk.Menu(root)
        tray = tk.Menu(menubar, tearoff=False)
        for label in (SHOW, QUIT):
            tray.add_command(label=label, command=lambda l=label: self._post_tray(l))
        menubar.add_cascade(label=APP_NAME, menu=tray)
        root.config(menu=menubar)

        root.bind_all("<Motion>", self._on_motion)
        root.bind_all("<ButtonPress-3>", self._on_right_press)

        self._root = root
        self._rendered_key = None
        self._render()
        root.after(POLL_MS, self._poll)
        try:
            root.mainloop()
        except SystemExit as exc:
            return exc.code if isinstance(exc.code, int) else 0
        finally:
            self._root = None
        return 0

    def _post_tray(self, label: str) -> None:
        self._tray_events.put(MenuEvent(self.state.tray.items[label]))

    def _poll(self) -> None:
        try:
            message: Message = self._tray_events.get_nowait()
        except queue.Empty:
            message = Noop()
        self._dispatch(message)
        if self._root is not None:
            self._root.after(POLL_MS, self._poll)

    def _on_motion(self, event: tk.Event) -> None:
        if self._root is None:
            return
        x = event.x_root - self._root.winfo_rootx()
        y = event.y_root - self._root.winfo_rooty()
        self._dispatch(WindowEvent(f"CursorMoved {{ position: Point {{ x: {x}.0, y: {y}.0 }} }}"))

    def _on_right_press(self, _event: tk.Event) -> None:
        self._dispatch(WindowEvent("MouseInput { state: Pressed, button: Right }"))

    def _dispatch(self, message: Message) -> None:
        try:
            update(self.state, message)
        except SystemExit:
            if self._root is not None:
                self._root.destroy()
                self._root = None
            raise
        self._render()

    def _table(self, message: TableMessage) -> None:
        self._dispatch(TableEvent(message))

    def _view_key(self) -> tuple:
        table = self.state.main_table
        return (self.state.show_confirm, table.selected, table.context_menu)

    def _render(self) -> None:
        if self._root is None:
            return
        key = self._view_key()
        if key == self._rendered_key:
            return
        self._rendered_key = key
        if self._body is not None:
            self._body.destroy()
        body = tk.Frame(self._root, bg=_BG)
        body.pack(fill="both", expand=True)
        self._body = body

        if self.state.show_confirm:
            self._build_confirm(body)
        elif (lines := self.state.main_table.details()) is not None:
            self._build_details(body, lines)
        else:
            self._build_table(body)

    def _build_confirm(self, parent: tk.Frame) -> None:
        box = tk.Frame(parent, bg=_BG)
        box.place(relx=0.5, rely=0.5, anchor="center")
        tk.Label(box, text="Are you sure you want to exit?", bg=_BG, fg=_FG).pack()
        buttons = tk.Frame(box, bg=_BG)
        buttons.pack()
        tk.Button(buttons, text="Confirm", command=lambda: self._dispatch(ConfirmExit())).pack(side="left")
        tk.Button(buttons, text="Cancel", command=lambda: self._dispatch(CancelExit())).pack(side="left")

    def _build_details(self, parent: tk.Frame, lines: Tuple[str, str, str, str]) -> None:
        parent.configure(bg=_PANEL)
        box = tk.Frame(parent, bg=_PANEL, padx=16, pady=16)
        box.place(relx=0.5, rely=0.5, anchor="center")
        name, *rest = lines
        tk.Label(box, text=name, bg=_PANEL, fg=_FG, font=("TkDefaultFont", 14)).pack(anchor="w")
        for line in rest:
            tk.Label(box, text=line, bg=_PANEL, fg=_FG).pack(anchor="w")
        tk.Button(box, text="Close", command=lambda: self._table(HideDetails())).pack(anchor="w")

    def _build_table(self, parent: tk.Frame) -> None:
        table = self.state.main_table
        grid = tk.Frame(parent, bg=_BG, padx=10, pady=10)
        grid.pack()
        bold = ("TkDefaultFont", 10, "bold")
        for column, (title, width) in enumerate((("Name", 45), ("Time", 10), ("Price", 10), ("Rating", 10))):
            tk.Label(grid, text=title, font=bold, width=width, anchor="w", bg=_BG, fg=_FG).grid(
                row=0, column=column, padx=5, pady=5
            )

        for index, cells in enumerate(table.row_cells(), start=1):
            for column, (cell, width) in enumerate(zip(cells, (45, 10, 10, 10))):
                anchor = "center" if cell.text == "Free" else "w"
                tk.Label(
                    grid, text=cell.text, width=width, anchor=anchor, bg=_BG, fg=_TONE_COLOURS[cell.tone]
                ).grid(row=index, column=column, padx=5, pady=2)
            tk.Button(
                grid, text="⋮", command=lambda i=index - 1: self._table(ShowDetails(i))
            ).grid(row=index, column=4, padx=5, pady=2)

        controls = tk.Frame(parent, bg=_PANEL, padx=10, pady=10)
        controls.pack(fill="x", padx=10, pady=10)
        self._slider_row(controls, 0, "Padding", 30.0, lambda: self.state.main_table.padding, PaddingChanged)
        self._slider_row(controls, 1, "Separator", 5.0, lambda: self.state.main_table.separator, SeparatorChanged)

        if table.context_menu is not None:
            index, x, _y = table.context_menu
            menu = tk.Frame(parent, bg=_PANEL, padx=8, pady=8)
            menu.pack(anchor="w", padx=menu_offset(x) + 10, pady=10)
            tk.Button(menu, text="Show details", command=lambda: self._table(ShowDetails(index))).pack(fill="x")
            tk.Button(menu, text="Close menu", command=lambda: self._table(HideContext())).pack(fill="x")

    def _slider_row(
        self,
        parent: tk.Frame,
        row: int,
        label: str,
        upper: float,
        current: Callable[[], Tuple[float, float]],
        make: Callable[[float, float], TableMessage],
    ) -> None:
        tk.Label(parent, text=label, font=_MONO, width=12, anchor="w", bg=_PANEL, fg=_FG).grid(row=row, column=0)
        x, y = current()
        texts = (tk.StringVar(value=format_px(x)), tk.StringVar(value=format_px(y)))

        def on_x(raw: str) -> None:
            value = float(raw)
            texts[0].set(format_px(value))
            self._table(make(value, current()[1]))

        def on_y(raw: str) -> None:
            value = float(raw)
            texts[1].set(format_px(value))
            self._table(make(current()[0], value))

        for column, (initial, handler, text) in enumerate(((x, on_x, texts[0]), (y, on_y, texts[1]))):
            scale = tk.Scale(
                parent, from_=0.0, to=upper, resolution=0.1, orient="horizontal",
                showvalue=False, bg=_PANEL, fg=_FG, highlightthickness=0,
            )
            scale.set(initial)
            scale.configure(command=handler)
            scale.grid(row=row, column=1 + column * 2, padx=5)
            tk.Label(parent, textvariable=text, font=("TkFixedFont", 8), bg=_PANEL, fg=_FG).grid(
                row=row, column=2 + column * 2
            )


def main(argv: Optional[list[str]] = None) -> int:
    """Start the event board window."""
    parser = argparse.ArgumentParser(prog="eventboard", description="Show the event board.")
    parser.add_argument("--log-level", default="DEBUG", help="logging level (default: DEBUG)")
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    return App().run()


if __name__ == "__main__":
    raise SystemExit(main())