# src/config/settings.py

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingSettings:
    INITIAL_COST: float = 1.0               # Unlock fee, charged once per billed ride
    PER_MINUTE_COST: float = 0.15           # Charged per started minute
    MINIMUM_BILLABLE_MINUTES: int = 1       # Rides this short (or shorter) are free

    def __post_init__(self):
        if self.INITIAL_COST < 0 or self.PER_MINUTE_COST < 0:
            raise ValueError("Pricing rates must be non-negative.")
        if self.MINIMUM_BILLABLE_MINUTES < 0:
            raise ValueError("MINIMUM_BILLABLE_MINUTES must be non-negative.")


@dataclass(frozen=True)
class UnitSettings:
    MPS_TO_MPH: float = 2.23694             # 1 m/s in miles per hour
    SECONDS_PER_MINUTE: int = 60
    DISTANCE_DECIMALS: int = 2
    MONEY_DECIMALS: int = 2
    SPEED_DECIMALS: int = 2


@dataclass(frozen=True)
class Paths:
    DATA_DIR: str = "data"  # Relative to package root
    EVENTS_FILE: str = "events.txt"
