from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_route_planner_service
from src.adapters.api.schemas.stations import (
    GeoPointSchema,
    ReloadResponseSchema,
    StationSchema,
)
from src.app.services.route_planner_service import RoutePlannerService

router = APIRouter(tags=["stations"])


@router.get("/stations", response_model=list[StationSchema])
def list_stations(
    locale: str | None = None,
    service: RoutePlannerService = Depends(get_route_planner_service),
) -> list[StationSchema]:
    return [
        StationSchema(
            key=station.key,
            name=name,
            lines=list(station.lines),
            location=(
                GeoPointSchema(lat=station.location.lat, lon=station.location.lon)
                if station.location
                else None
            ),
        )
        for station, name in service.list_stations(locale=locale)
    ]


@router.post("/stations/reload", response_model=ReloadResponseSchema)
def reload_stations(
    service: RoutePlannerService = Depends(get_route_planner_service),
) -> ReloadResponseSchema:
    return ReloadResponseSchema(station_count=service.reload_stations())
