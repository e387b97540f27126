"""The events shown on the board."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class Event:
    """A single outing with its length, cost and rating."""

    name: str
    duration: timedelta
    price: float
    rating: float

    def minutes(self) -> int:
        """Whole minutes the event lasts."""
        return int(self.duration.total_seconds()) // 60


def _hours(n: int) -> timedelta:
    return timedelta(hours=n)


def _minutes(n: int) -> timedelta:
    return timedelta(minutes=n)


def default_events() -> list[Event]:
    """The built-in list of events, in display order."""
    return [
        Event("Get lost in a hacker bookstore", _hours(2), 0.0, 4.9),
        Event("Buy vintage synth at Noisebridge flea market", _hours(1), 150.0, 4.8),
        Event("Eat a questionable hot dog at 2AM", _minutes(20), 5.0, 1.7),
        Event("Ride the MUNI for the story", _minutes(60), 3.0, 4.1),
        Event("Scream into the void from Twin Peaks", _minutes(40), 0.0, 4.9),
        Event("Buy overpriced coffee and feel things", _minutes(25), 6.5, 4.5),
        Event("Attend an underground robot poetry slam", _hours(1), 12.0, 4.8),
        Event("Browse cursed tech at a retro computer fair", _hours(2), 10.0, 4.7),
        Event("Try to order at a secret ramen place with no sign", _minutes(50), 14.0, 4.6),
        Event("Join a spontaneous rooftop drone rave", _hours(3), 0.0, 4.9),
        Event("Sketch a stranger at Dolores Park", _minutes(45), 0.0, 4.4),
        Event("Visit the Museum of Obsolete APIs", _hours(1), 9.99, 4.2),
        Event("Chase the last working payphone", _minutes(35), 0.25, 4.0),
        Event("Trade zines with a punk on BART", _minutes(30), 3.5, 4.7),
        Event("Get a tattoo of the Git logo", _hours(1), 200.0, 4.6),
    ]