# src/reporting/summary.py
"""
Container for the six fleet answers and the function that computes them.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ride_stats.src.core.event import Event
from ride_stats.src.config.settings import PricingSettings
from ride_stats.src.analysis import (
    count_drops,
    max_displacement,
    max_total_distance,
    max_total_cost,
    max_wait_time,
    average_speed
)


@dataclass
class FleetSummary:
    drop_count: int
    farthest_from_drop: Optional[Tuple[str, float]]          # vehicle -> displacement
    longest_total_distance: Optional[Tuple[str, float]]      # vehicle -> distance
    highest_paying_user: Optional[Tuple[Optional[str], float]]  # user (None = unknown) -> cost
    longest_wait: Optional[Tuple[str, int]]                  # vehicle -> seconds
    average_speed_mph: float


def summarize(events: List[Event], pricing: PricingSettings = PricingSettings()) -> FleetSummary:
    return FleetSummary(
        drop_count=count_drops(events),
        farthest_from_drop=max_displacement(events),
        longest_total_distance=max_total_distance(events),
        highest_paying_user=max_total_cost(events, pricing),
        longest_wait=max_wait_time(events),
        average_speed_mph=average_speed(events)
    )
