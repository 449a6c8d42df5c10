# ============================================================================
# GEOGRAPHIC PRIMITIVES
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Domain model - Coordinates and bounding rectangle
# PURPOSE: Lat/lng pair and the fixed pan bounds of the map
# CREATED: 19 OCT 2026
# ============================================================================
"""
Geographic primitives.

Coordinates are WGS84 degrees, latitude first - the order the browser
mapping library expects.
"""

from typing import Tuple

from pydantic import BaseModel, Field, model_validator


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class LatLng(BaseModel):
    """A latitude/longitude pair."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in degrees")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, pair: Tuple[float, float]) -> "LatLng":
        """Build from a (lat, lng) tuple."""
        return cls(lat=pair[0], lng=pair[1])

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lng)


class Bounds(BaseModel):
    """
    Axis-aligned pan bounds.

    Configured once at startup and never mutated.
    """

    south: float = Field(..., ge=-90, le=90)
    west: float = Field(..., ge=-180, le=180)
    north: float = Field(..., ge=-90, le=90)
    east: float = Field(..., ge=-180, le=180)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_order(self) -> "Bounds":
        if self.south > self.north:
            raise ValueError("south must not exceed north")
        if self.west > self.east:
            raise ValueError("west must not exceed east")
        return self

    @classmethod
    def of(cls, rect: Tuple[float, float, float, float]) -> "Bounds":
        """Build from a (south, west, north, east) tuple."""
        south, west, north, east = rect
        return cls(south=south, west=west, north=north, east=east)

    def contains(self, point: LatLng) -> bool:
        return (
            self.south <= point.lat <= self.north
            and self.west <= point.lng <= self.east
        )

    def clamp(self, point: LatLng) -> LatLng:
        """Nearest point inside the rectangle."""
        if self.contains(point):
            return point
        return LatLng(
            lat=_clamp(point.lat, self.south, self.north),
            lng=_clamp(point.lng, self.west, self.east),
        )

    def corners(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """[[south, west], [north, east]] as used by maxBounds."""
        return ((self.south, self.west), (self.north, self.east))


__all__ = ["LatLng", "Bounds"]
