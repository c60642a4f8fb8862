# src/core/geometry.py
from dataclasses import dataclass
from shapely.geometry import Point as ShapelyPoint

from ride_stats.src.config.settings import UnitSettings


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def geometry(self) -> ShapelyPoint:
        return ShapelyPoint(self.x, self.y)


def distance_squared(p1: Point, p2: Point) -> float:
    """
    Squared euclidean distance, no rounding and no square root.
    Only meaningful for ordering comparisons (e.g. finding the farthest point).
    """
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points, rounded to 2 decimals."""
    return round(p1.geometry.distance(p2.geometry), UnitSettings.DISTANCE_DECIMALS)
