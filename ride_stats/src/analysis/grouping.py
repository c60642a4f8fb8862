# src/analysis/grouping.py
"""
Grouping of events by vehicle or by user, and the extremum scan used by every
"which one has the most" question.
"""

from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

from ride_stats.src.core.event import Event

K = TypeVar("K", bound=Hashable)


def group_events(events: Iterable[Event], key: Callable[[Event], K]) -> Dict[K, List[Event]]:
    """Group events into key -> events, keeping first-seen key order and event order."""
    groups: Dict[K, List[Event]] = {}
    for event in events:
        groups.setdefault(key(event), []).append(event)
    return groups


def group_by_vehicle(events: Iterable[Event]) -> Dict[str, List[Event]]:
    return group_events(events, lambda e: e.vehicle_id)


def group_by_user(events: Iterable[Event]) -> Dict[Optional[str], List[Event]]:
    """
    Group events by user. Events without a user (e.g. DROP) land under the None key,
    which never collides with a real user ID (not even "").
    """
    return group_events(events, lambda e: e.user_id)


def find_max(values: Dict[K, float]) -> Optional[Tuple[K, float]]:
    """
    Return the (key, value) pair with the largest value, or None if empty.
    Ties go to the first key in iteration order.
    """
    best: Optional[Tuple[K, float]] = None
    for key, value in values.items():
        if best is None or value > best[1]:
            best = (key, value)
    return best
