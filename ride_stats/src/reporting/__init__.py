# src/reporting/__init__.py
from .summary import FleetSummary, summarize
from .report import format_report, print_report

__all__ = [
    "FleetSummary",
    "summarize",
    "format_report",
    "print_report"
]
