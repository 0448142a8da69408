from __future__ import annotations

import os
from functools import lru_cache

from src.adapters.persistence.local_station_repository import LocalStationRepository
from src.adapters.remote.http_station_repository import HttpStationRepository
from src.app.ports.output import IStationRepository
from src.app.services.route_planner_service import RoutePlannerService
from src.app.services.station_graph_store import StationGraphStore
from src.domain.models import DEFAULT_LOCALE_CHAIN


def _locale_chain() -> tuple[str, ...]:
    raw = os.getenv("METRO_LOCALES") or ""
    locales = tuple(part.strip() for part in raw.split(",") if part.strip())
    return locales or DEFAULT_LOCALE_CHAIN


@lru_cache(maxsize=1)
def get_station_graph_store() -> StationGraphStore:
    # One store per process: the graph is loaded once and shared read-only.
    repository: IStationRepository
    if os.getenv("METRO_STATIONS_URL"):
        repository = HttpStationRepository()
    else:
        repository = LocalStationRepository()
    return StationGraphStore(station_repository=repository, locale_chain=_locale_chain())


def get_route_planner_service() -> RoutePlannerService:
    service = RoutePlannerService(graph_store=get_station_graph_store())

    # Allow tuning via env without changing code.
    if os.getenv("METRO_TIME_PER_STATION_MIN"):
        service.time_per_station_min = int(os.environ["METRO_TIME_PER_STATION_MIN"])
    if os.getenv("METRO_TIME_PER_LINE_CHANGE_MIN"):
        service.time_per_line_change_min = int(
            os.environ["METRO_TIME_PER_LINE_CHANGE_MIN"]
        )

    return service
