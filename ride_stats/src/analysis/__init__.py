# src/analysis/__init__.py
from .grouping import group_events, group_by_vehicle, group_by_user, find_max
from .statistics import (
    count_drops,
    displacement,
    max_displacement,
    total_ride_distance,
    max_total_distance,
    total_cost,
    max_total_cost,
    wait_times,
    longest_wait_time,
    max_wait_time,
    average_speed
)

__all__ = [
    "group_events",
    "group_by_vehicle",
    "group_by_user",
    "find_max",
    "count_drops",
    "displacement",
    "max_displacement",
    "total_ride_distance",
    "max_total_distance",
    "total_cost",
    "max_total_cost",
    "wait_times",
    "longest_wait_time",
    "max_wait_time",
    "average_speed"
]
