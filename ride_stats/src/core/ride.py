# src/core/ride.py
from dataclasses import dataclass
from math import ceil
from typing import Iterable, List, Optional

from ride_stats.src.config.settings import PricingSettings, UnitSettings
from .event import Event, EventType, time_delta
from .geometry import distance


@dataclass(frozen=True)
class Ride:
    """
    A pair of START_RIDE and END_RIDE events.
    Only build through `Ride.from_events`, which rejects invalid pairs.
    """
    start_event: Event
    end_event: Event

    @classmethod
    def from_events(cls, start_event: Event, end_event: Event) -> Optional["Ride"]:
        """
        Return a Ride if the event types are correct, vehicle and user IDs match
        and the ride doesn't end before it starts. Otherwise return None.
        """
        if start_event.event_type is not EventType.START_RIDE:
            return None
        if end_event.event_type is not EventType.END_RIDE:
            return None
        if start_event.vehicle_id != end_event.vehicle_id:
            return None
        if start_event.user_id != end_event.user_id:
            return None
        if start_event.timestamp > end_event.timestamp:
            return None
        return cls(start_event=start_event, end_event=end_event)

    @property
    def vehicle_id(self) -> str:
        return self.start_event.vehicle_id

    @property
    def user_id(self) -> Optional[str]:
        return self.start_event.user_id

    @property
    def distance(self) -> float:
        return distance(self.start_event.location, self.end_event.location)

    @property
    def duration_seconds(self) -> int:
        return time_delta(self.start_event, self.end_event)

    @property
    def duration_minutes(self) -> int:
        # Partial minutes are billed as whole minutes
        return ceil(self.duration_seconds / UnitSettings.SECONDS_PER_MINUTE)

    def cost(self, pricing: PricingSettings = PricingSettings()) -> float:
        minutes = self.duration_minutes
        if minutes <= pricing.MINIMUM_BILLABLE_MINUTES:
            return 0.0
        return round(pricing.INITIAL_COST + minutes * pricing.PER_MINUTE_COST, UnitSettings.MONEY_DECIMALS)

    def __repr__(self) -> str:
        return (f"Ride(vehicle={self.vehicle_id}, user={self.user_id}, "
                f"t={self.start_event.timestamp}->{self.end_event.timestamp})")


def reconstruct_rides(events: Iterable[Event]) -> List[Ride]:
    """
    Pair the i-th START_RIDE with the i-th END_RIDE (positionally, truncating to the
    shorter list). Pairs that don't form a valid Ride are dropped.

    Relies on the log never interleaving two rides of the same vehicle; on irregular
    input this under-counts rides rather than matching intervals.
    """
    events = list(events)
    starts = [e for e in events if e.event_type is EventType.START_RIDE]
    ends = [e for e in events if e.event_type is EventType.END_RIDE]

    rides: List[Ride] = []
    for start_event, end_event in zip(starts, ends):
        ride = Ride.from_events(start_event, end_event)
        if ride is not None:
            rides.append(ride)
    return rides


def wait_time(previous: Ride, following: Ride) -> int:
    """Idle seconds between the end of one ride and the start of the next."""
    return time_delta(previous.end_event, following.start_event)
