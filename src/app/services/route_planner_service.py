from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pyuca import Collator

from src.domain.algorithms import (
    TIME_PER_LINE_CHANGE_MIN,
    TIME_PER_STATION_MIN,
    build_itinerary,
    shortest_path,
)
from src.domain.models import Itinerary, NoPathFound, Station

from .route_summary import RouteSummary, describe, share_query
from .station_graph_store import StationGraphStore


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Unicode collation puts Persian letters (e.g. پ after ب) in alphabetical order.
    return Collator()


@dataclass(frozen=True, slots=True)
class RoutePlan:
    """Everything the presentation layer needs for one computed route.

    Saving, sharing and printing reuse this value instead of searching again.
    """

    itinerary: Itinerary
    summary: RouteSummary
    share_query: str
    stations: tuple[Station, ...]
    names: dict[str, str]


@dataclass(slots=True)
class RoutePlannerService:
    """Application service (use case) for metro route planning.

    Each request works on a single station graph snapshot.
    """

    graph_store: StationGraphStore

    # Tuning knobs
    time_per_station_min: int = TIME_PER_STATION_MIN
    time_per_line_change_min: int = TIME_PER_LINE_CHANGE_MIN

    def plan_route(
        self, *, source: str, destination: str, locale: str | None = None
    ) -> RoutePlan | NoPathFound:
        graph = self.graph_store.current()

        path = shortest_path(graph, source, destination)
        if isinstance(path, NoPathFound):
            return path

        itinerary = build_itinerary(
            graph,
            path,
            time_per_station_min=self.time_per_station_min,
            time_per_line_change_min=self.time_per_line_change_min,
        )
        summary = describe(itinerary, graph, locale)
        return RoutePlan(
            itinerary=itinerary,
            summary=summary,
            share_query=share_query(itinerary),
            stations=tuple(graph[key] for key in path),
            names={key: graph.display_name(key, locale) for key in path},
        )

    def list_stations(
        self, *, locale: str | None = None
    ) -> list[tuple[Station, str]]:
        """Stations with their display names, sorted by name."""

        graph = self.graph_store.current()
        named = [
            (station, graph.display_name(station.key, locale))
            for station in graph.stations()
        ]
        collator = _collator()
        named.sort(key=lambda item: (collator.sort_key(item[1]), item[0].key))
        return named

    def reload_stations(self) -> int:
        return len(self.graph_store.reload())
