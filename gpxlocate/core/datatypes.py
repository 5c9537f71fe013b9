from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional


class GapSign(str, Enum):
    add = "+"
    subtract = "-"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class TrackPoint:
    """One timed <trkpt>; timestamp is timezone-aware UTC."""

    timestamp: datetime
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


@dataclass
class Track:
    """Timed points in document order.

    raw_count is the number of <trkpt> elements found, including the ones that
    were dropped for lacking a usable time.
    """

    points: List[TrackPoint] = field(default_factory=list)
    raw_count: int = 0

    def is_empty(self) -> bool:
        return len(self.points) == 0


@dataclass(frozen=True)
class GapOffset:
    magnitude: timedelta = timedelta(0)
    sign: GapSign = GapSign.add

    def signed(self) -> timedelta:
        return self.magnitude if self.sign == GapSign.add else -self.magnitude


@dataclass(frozen=True)
class SearchResult:
    coordinate: Coordinate
    time_difference_seconds: int
    target: Optional[datetime] = None  # effective search instant (UTC)
    timestamp: Optional[datetime] = None  # winning point's time (UTC)

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude
