from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class RideSegment:
    """Travel along one edge on a specific line."""

    from_station: str
    to_station: str
    line: int
    distance_m: float | None = None


@dataclass(frozen=True, slots=True)
class LineChange:
    """Interchange at a station, between two ride segments on different lines."""

    at_station: str
    from_line: int
    to_line: int
    minutes: int = 0


ItineraryEvent = Union[RideSegment, LineChange]


@dataclass(frozen=True, slots=True)
class Itinerary:
    path: tuple[str, ...]
    events: tuple[ItineraryEvent, ...] = field(default_factory=tuple)
    total_minutes: int = 0

    @property
    def source(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def station_count(self) -> int:
        return len(self.path)

    @property
    def ride_segments(self) -> tuple[RideSegment, ...]:
        return tuple(e for e in self.events if isinstance(e, RideSegment))

    @property
    def line_changes(self) -> tuple[LineChange, ...]:
        return tuple(e for e in self.events if isinstance(e, LineChange))

    @property
    def lines_used(self) -> tuple[int, ...]:
        """Lines ridden, in boarding order, without consecutive repeats."""

        out: list[int] = []
        for segment in self.ride_segments:
            if not out or out[-1] != segment.line:
                out.append(segment.line)
        return tuple(out)

    @property
    def total_distance_m(self) -> float | None:
        distances = [s.distance_m for s in self.ride_segments]
        if any(d is None for d in distances):
            return None
        return float(sum(d for d in distances if d is not None))
