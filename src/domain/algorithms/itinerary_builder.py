from __future__ import annotations

import logging
from typing import Sequence

from src.domain.algorithms.geo_utils import optional_distance_m
from src.domain.models import (
    Itinerary,
    ItineraryEvent,
    LineChange,
    RideSegment,
    Station,
    StationGraph,
)

logger = logging.getLogger(__name__)

TIME_PER_STATION_MIN = 2
TIME_PER_LINE_CHANGE_MIN = 5


def segment_line(prev: Station, curr: Station) -> int:
    """Line connecting two adjacent stations.

    First line of ``curr`` that ``prev`` also serves. When the stations share
    no line the edge still exists, so ``curr``'s first line is used.
    """

    shared = next((line for line in curr.lines if line in prev.lines), None)
    if shared is None:
        logger.debug(
            "Stations %r and %r share no line; using line %d",
            prev.key,
            curr.key,
            curr.lines[0],
        )
        return curr.lines[0]
    return shared


def build_itinerary(
    graph: StationGraph,
    path: Sequence[str],
    *,
    time_per_station_min: int = TIME_PER_STATION_MIN,
    time_per_line_change_min: int = TIME_PER_LINE_CHANGE_MIN,
) -> Itinerary:
    """Turn a station path into ride segments and line changes.

    Line changes are placed at the station where the rider switches trains,
    immediately before the first ride segment on the new line. The total is
    ``rides * time_per_station_min + changes * time_per_line_change_min``.
    """

    if not path:
        raise ValueError("Path must contain at least one station")
    if time_per_station_min < 0 or time_per_line_change_min < 0:
        raise ValueError("Travel time estimates must not be negative")

    stations = [graph[key] for key in path]
    if len(stations) == 1:
        return Itinerary(path=tuple(path))

    events: list[ItineraryEvent] = []
    total = 0
    previous_line = stations[0].lines[0]

    for index, (prev, curr) in enumerate(zip(stations, stations[1:])):
        line = segment_line(prev, curr)

        if index > 0 and line != previous_line:
            events.append(
                LineChange(
                    at_station=prev.key,
                    from_line=previous_line,
                    to_line=line,
                    minutes=time_per_line_change_min,
                )
            )
            total += time_per_line_change_min

        events.append(
            RideSegment(
                from_station=prev.key,
                to_station=curr.key,
                line=line,
                distance_m=optional_distance_m(prev.location, curr.location),
            )
        )
        total += time_per_station_min
        previous_line = line

    return Itinerary(path=tuple(path), events=tuple(events), total_minutes=total)
