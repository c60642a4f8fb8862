import pytest

from ride_stats.src.core.event import Event, EventType
from ride_stats.src.core.geometry import Point


def make_event(timestamp, vehicle_id, event_type, x=0.0, y=0.0, user_id=None):
    return Event(
        timestamp=timestamp,
        vehicle_id=vehicle_id,
        event_type=event_type,
        location=Point(x, y),
        user_id=user_id
    )


def drop(timestamp, vehicle_id, x=0.0, y=0.0):
    return make_event(timestamp, vehicle_id, EventType.DROP, x, y)


def start(timestamp, vehicle_id, x=0.0, y=0.0, user_id="u1"):
    return make_event(timestamp, vehicle_id, EventType.START_RIDE, x, y, user_id)


def end(timestamp, vehicle_id, x=0.0, y=0.0, user_id="u1"):
    return make_event(timestamp, vehicle_id, EventType.END_RIDE, x, y, user_id)


@pytest.fixture
def fleet_events():
    """
    Two vehicles, three users.
    A: drop (0,0); ride u1 (0,0)->(3,4) 0..98s; ride u2 (3,4)->(6,8) 200..353s
    B: drop (10,10); ride u1 (10,10)->(10,20) 50..110s
    """
    return [
        drop(0, "A", 0, 0),
        drop(0, "B", 10, 10),
        start(0, "A", 0, 0, "u1"),
        start(50, "B", 10, 10, "u1"),
        end(98, "A", 3, 4, "u1"),
        end(110, "B", 10, 20, "u1"),
        start(200, "A", 3, 4, "u2"),
        end(353, "A", 6, 8, "u2"),
    ]
