from datetime import timedelta

from eventboard.events import Event, default_events


def test_minutes_from_duration():
    event = Event("walk", timedelta(minutes=20), 0.0, 3.0)
    assert event.minutes() == 20


def test_minutes_drops_partial_minute():
    event = Event("walk", timedelta(minutes=5, seconds=59), 0.0, 3.0)
    assert event.minutes() == 5


def test_first_default_event():
    first = default_events()[0]
    assert first.name == "Get lost in a hacker bookstore"
    assert first.price == 0.0
    assert first.rating == 4.9
    assert first.minutes() == 120


def test_default_events_count():
    assert len(default_events()) == 15


def test_default_events_names_unique():
    names = [event.name for event in default_events()]
    assert len(set(names)) == len(names)


def test_default_events_values_in_range():
    for event in default_events():
        assert 0.0 <= event.rating <= 5.0
        assert event.price >= 0.0
        assert event.minutes() > 0


def test_default_events_is_fresh_list():
    events = default_events()
    events.clear()
    assert default_events()