# src/reporting/report.py
"""
Console rendering of a FleetSummary: one question/answer block per statistic.
Answers with no result (e.g. no vehicles at all) are left out.
"""

from typing import List, Optional

from .summary import FleetSummary

UNKNOWN_USER = "Unknown user"


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def format_user(user_id: Optional[str]) -> str:
    return UNKNOWN_USER if user_id is None else user_id


def format_report(summary: FleetSummary) -> List[str]:
    lines = [
        f"1. What is the total number of vehicles dropped off? {summary.drop_count}"
    ]

    if summary.farthest_from_drop is not None:
        vehicle_id, value = summary.farthest_from_drop
        lines.append(f"2. Which vehicle ends up the farthest away from its drop location? {vehicle_id}")
        lines.append(f"   What is the distance? {value:.2f}")

    if summary.longest_total_distance is not None:
        vehicle_id, value = summary.longest_total_distance
        lines.append(f"3. Which vehicle has traveled the longest distance in total on all of its rides? {vehicle_id}")
        lines.append(f"   How far is it? {value:.2f}")

    if summary.highest_paying_user is not None:
        user_id, value = summary.highest_paying_user
        lines.append(f"4. Which user has paid the most? {format_user(user_id)}")
        lines.append(f"   How much is it? {format_currency(value)}")

    if summary.longest_wait is not None:
        vehicle_id, value = summary.longest_wait
        lines.append(f"5. Which vehicle has the longest wait time between two rides? {vehicle_id}")
        lines.append(f"   How many seconds is it? {value}")

    lines.append(f"6. What is the average speed travelled across all rides? {summary.average_speed_mph:.2f} mph")
    return lines


def print_report(summary: FleetSummary) -> None:
    print(f"\n{'='*60}")
    print("FLEET STATISTICS")
    print(f"{'='*60}")
    for line in format_report(summary):
        print(line)
