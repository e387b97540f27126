from datetime import timedelta

import pytest

from eventboard.events import Event, default_events
from eventboard.table import (
    Cell,
    HideContext,
    HideDetails,
    PaddingChanged,
    SeparatorChanged,
    ShowDetails,
    Table,
    Tone,
    parse_cursor,
)


def test_parse_cursor_reads_both_coordinates():
    assert parse_cursor("CursorMoved { position: Point { x: 12.5, y: 40.0 } }") == (12.5, 40.0)


def test_parse_cursor_negative_values():
    assert parse_cursor("Moved(Point { x: -3.0, y: -7.5 })") == (-3.0, -7.5)


def test_parse_cursor_missing_coordinate():
    assert parse_cursor("CursorMoved { x: 1.0 }") is None


def test_parse_cursor_unparsable_number():
    assert parse_cursor("x: abc, y: 2.0") is None


def test_defaults():
    table = Table()
    assert table.padding == (10.0, 5.0)
    assert table.separator == (1.0, 1.0)
    assert table.selected is None
    assert table.context_menu is None
    assert len(table.events) == len(default_events())


def test_update_padding_and_separator():
    table = Table()
    table.update(PaddingChanged(20.0, 3.0))
    table.update(SeparatorChanged(2.0, 4.0))
    assert table.padding == (20.0, 3.0)
    assert table.separator == (2.0, 4.0)


def test_show_and_hide_details():
    table = Table()
    table.update(ShowDetails(2))
    assert table.selected == 2
    table.update(HideDetails())
    assert table.selected is None
    assert table.details() is None


def test_update_rejects_unknown_message():
    with pytest.raises(TypeError):
        Table().update("bogus")


def test_cursor_move_updates_last_cursor():
    table = Table()
    table.on_window_event_debug("CursorMoved { position: Point { x: 50.0, y: 90.0 } }")
    assert table.last_cursor == (50.0, 90.0)


def test_move_without_marker_ignored():
    table = Table()
    table.on_window_event_debug("Resized { x: 50.0, y: 90.0 }")
    assert table.last_cursor is None


def test_right_click_opens_context_menu():
    table = Table()
    table.on_window_event_debug("CursorMoved { x: 5.0, y: 37.0 }")
    table.on_window_event_debug("MouseInput { state: Pressed, button: Right }")
    assert table.context_menu == (0, 5.0, 37.0)
    table.update(HideContext())
    assert table.context_menu is None


def test_right_click_on_header_ignored():
    table = Table()
    table.on_window_event_debug("CursorMoved { x: 5.0, y: 10.0 }")
    table.on_window_event_debug("ButtonPressed(Right)")
    assert table.context_menu is None


def test_right_click_below_rows_ignored():
    table = Table()
    table.on_window_event_debug("CursorMoved { x: 5.0, y: 100000.0 }")
    table.on_window_event_debug("ButtonPressed(Right)")
    assert table.context_menu is None


def test_left_click_ignored():
    table = Table()
    table.on_window_event_debug("CursorMoved { x: 5.0, y: 40.0 }")
    table.on_window_event_debug("ButtonPressed(Left)")
    assert table.context_menu is None


def test_row_cells_follow_events():
    table = Table()
    rows = table.row_cells()
    assert [row[0].text for row in rows] == [event.name for event in table.events]


def test_free_events_marked_success():
    table = Table()
    for event, (_, _, price, _) in zip(table.events, table.row_cells()):
        if event.price == 0.0:
            assert price == Cell("Free", Tone.SUCCESS)
        else:
            assert price.text.startswith("$")


def test_tones_follow_thresholds():
    table = Table()
    for event, (_, time, price, rating) in zip(table.events, table.row_cells()):
        assert (time.tone is Tone.WARNING) == (event.minutes() > 90)
        if event.price > 100.0:
            assert price.tone is Tone.WARNING
        assert (rating.tone is Tone.SUCCESS) == (event.rating > 4.7)
        assert (rating.tone is Tone.DANGER) == (event.rating < 2.0)


def test_price_formatting_two_decimals():
    table = Table(events=[Event("coffee", timedelta(minutes=25), 6.5, 4.5)])
    _, time, price, rating = table.row_cells()[0]
    assert price.text == "$6.50"
    assert time.text == "25 min"
    assert rating.text == "4.50"


def test_details_of_selected_event():
    table = Table(events=[Event("coffee", timedelta(minutes=25), 6.5, 4.5)])
    table.update(ShowDetails(0))
    assert table.details() == (
        "Name: coffee",
        "Duration: 25 min",
        "Price: $6.50",
        "Rating: 4.50",
    )


def test_details_out_of_range_is_none():
    table = Table()
    table.update(ShowDetails(len(table.events)))
    assert table.details() is None