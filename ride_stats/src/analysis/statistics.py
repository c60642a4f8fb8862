# src/analysis/statistics.py
"""
Fleet statistics computed from the event log.
Each function recomputes the rides it needs from the events it is given.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ride_stats.src.core.event import Event
from ride_stats.src.core.geometry import distance, distance_squared
from ride_stats.src.core.ride import reconstruct_rides, wait_time
from ride_stats.src.config.settings import PricingSettings, UnitSettings
from .grouping import find_max, group_by_user, group_by_vehicle


def count_drops(events: Sequence[Event]) -> int:
    return sum(1 for e in events if e.is_drop)


# --- Displacement -----------------------------------------------------------

def displacement(events: Sequence[Event]) -> float:
    """
    Distance between the first event (the drop) and the last event of a vehicle.
    Events are assumed sorted; an empty list counts as 0.
    """
    if not events:
        return 0.0
    return distance(events[0].location, events[-1].location)


def max_displacement(events: Sequence[Event]) -> Optional[Tuple[str, float]]:
    """Vehicle that ends up farthest from its drop location, and that distance."""
    vehicles = group_by_vehicle(events)
    squared: Dict[str, float] = {
        vehicle_id: distance_squared(vehicle_events[0].location, vehicle_events[-1].location)
        for vehicle_id, vehicle_events in vehicles.items()
    }
    best = find_max(squared)
    if best is None:
        return None
    vehicle_id = best[0]
    return vehicle_id, displacement(vehicles[vehicle_id])


# --- Ride distance ----------------------------------------------------------

def total_ride_distance(events: Sequence[Event]) -> float:
    """Sum of ride distances, rides reconstructed from the given events."""
    return round(
        sum(ride.distance for ride in reconstruct_rides(events)),
        UnitSettings.DISTANCE_DECIMALS
    )


def max_total_distance(events: Sequence[Event]) -> Optional[Tuple[str, float]]:
    """Vehicle with the longest total distance over all of its rides."""
    totals = {
        vehicle_id: total_ride_distance(vehicle_events)
        for vehicle_id, vehicle_events in group_by_vehicle(events).items()
    }
    return find_max(totals)


# --- Cost -------------------------------------------------------------------

def total_cost(events: Sequence[Event], pricing: PricingSettings = PricingSettings()) -> float:
    return round(
        sum(ride.cost(pricing) for ride in reconstruct_rides(events)),
        UnitSettings.MONEY_DECIMALS
    )


def max_total_cost(
    events: Sequence[Event],
    pricing: PricingSettings = PricingSettings()
) -> Optional[Tuple[Optional[str], float]]:
    """User that paid the most. The None key stands for events without a user."""
    totals = {
        user_id: total_cost(user_events, pricing)
        for user_id, user_events in group_by_user(events).items()
    }
    return find_max(totals)


# --- Wait time --------------------------------------------------------------

def wait_times(events: Sequence[Event]) -> List[int]:
    """Idle gaps between each ride and the one right after it."""
    rides = reconstruct_rides(events)
    return [wait_time(previous, following) for previous, following in zip(rides, rides[1:])]


def longest_wait_time(events: Sequence[Event]) -> int:
    """Longest gap between two consecutive rides; 0 with fewer than 2 rides."""
    return max(wait_times(events), default=0)


def max_wait_time(events: Sequence[Event]) -> Optional[Tuple[str, int]]:
    """Vehicle with the longest wait between two of its rides."""
    longest = {
        vehicle_id: longest_wait_time(vehicle_events)
        for vehicle_id, vehicle_events in group_by_vehicle(events).items()
    }
    return find_max(longest)


# --- Speed ------------------------------------------------------------------

def average_speed(events: Sequence[Event]) -> float:
    """
    Average speed over all rides in mph: total ride distance (meters) divided by
    total ride duration (seconds), converted from m/s.
    Returns 0.0 when there is no ride time at all.
    """
    rides = reconstruct_rides(events)
    distances = np.array([ride.distance for ride in rides], dtype=float)
    durations = np.array([ride.duration_seconds for ride in rides], dtype=float)

    total_duration = durations.sum()
    if total_duration == 0:
        return 0.0

    mps = distances.sum() / total_duration
    return round(float(mps * UnitSettings.MPS_TO_MPH), UnitSettings.SPEED_DECIMALS)
