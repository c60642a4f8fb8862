# src/core/event.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geometry import Point


class EventType(Enum):
    """Types of events recorded in the event log"""
    DROP = "DROP"
    START_RIDE = "START_RIDE"
    END_RIDE = "END_RIDE"


@dataclass(frozen=True)
class Event:
    """
    A single entry of the event log.
    A DROP event is when a vehicle is initially put into the fleet; it has no user.
    """
    timestamp: int          # seconds since the start of the log
    vehicle_id: str
    event_type: EventType
    location: Point
    user_id: Optional[str] = None

    @property
    def is_drop(self) -> bool:
        return self.event_type is EventType.DROP

    def __repr__(self) -> str:
        return f"Event(t={self.timestamp}, type={self.event_type.value}, vehicle={self.vehicle_id})"


def time_delta(a: Event, b: Event) -> int:
    """Seconds between two events, regardless of argument order."""
    return abs(a.timestamp - b.timestamp)
