# eventboard

A small desktop event board drawn with Tk. It shows a table of outings
with their duration, price and rating, colours the values that stand
out, and opens a details dialog for a row either from the row's `⋮`
button or from a right-click context menu. Closing the window asks for
confirmation first.

## Installing

```
pip install .
```

Tk ships with most Python builds; no other libraries are needed.

## Running

```
eventboard
```

Options:

- `--log-level LEVEL` — logging level, `DEBUG` by default.

The window has:

- the table, with the name, time, price and rating of every outing.
  Times over 90 minutes and prices over $100 are shown in a warning
  colour, free outings read "Free", ratings above 4.7 are shown in a
  success colour and ratings below 2.0 in a danger colour;
- two rows of sliders, "Padding" (0–30) and "Separator" (0–5), each with
  a horizontal and a vertical value shown in pixels. The values are kept
  in the table state; the layout of the table does not change with them;
- a menu named "MyApp" with the entries "Show" and "Quit". "Quit" ends
  the program; "Show" is only logged;
- a context menu with "Show details" and "Close menu", opened by a right
  button press below the 36-pixel header, for the row at that height
  (rows are taken to be 36 pixels tall).

Closing the window shows "Are you sure you want to exit?" with "Confirm"
and "Cancel".

## What it does not do

It puts no icon in the system tray: the "Show" and "Quit" entries live in
the window's menu bar instead, and "Show" does not raise or hide the
window.

## Using the model without a window

The table state can be driven directly:

```python
from eventboard.table import Table, ShowDetails, HideDetails, PaddingChanged

table = Table()
for cells in table.row_cells():
    print(cells)

table.update(PaddingChanged(20.0, 8.0))
table.update(ShowDetails(2))
print(table.details())
table.update(HideDetails())
```

- `eventboard.events`: `Event` (name, duration, price, rating, and
  `minutes()`) and `default_events()`, the built-in list of outings.
- `eventboard.table`: `Table`, the messages `PaddingChanged`,
  `SeparatorChanged`, `ShowDetails`, `HideDetails` and `HideContext`,
  and `Cell` with its `Tone`. `Table.row_cells()` gives the styled cells
  of every row, `Table.details()` the lines of the details dialog for the
  selected row (or `None`). `Table.on_window_event_debug(text)` reads a
  textual window event: cursor moves update the last pointer position,
  and a right button press over a row opens the context menu for that
  row. `parse_cursor(text)` extracts the `x:` and `y:` numbers from such
  text.
- `eventboard.app`: `AppState` and `update(state, message)`, which
  applies a `WindowEvent`, `MenuEvent`, `ConfirmExit`, `CancelExit`,
  `TableEvent` or `Noop`. `ConfirmExit` raises `SystemExit`.
  `TrayMenu.handle(event)` returns `"Show"` for the Show entry and raises
  `SystemExit` for the Quit entry.
- `eventboard.gui`: `App` with `run()`, `main(argv=None)`, and the helpers
  `format_px(value)` and `menu_offset(x)`.

## Tests

```
pip install ".[test]"
pytest
```