from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .stations import GeoPointSchema


class RouteRequestSchema(BaseModel):
    source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    locale: str | None = None


class RouteStationSchema(BaseModel):
    key: str
    name: str
    location: GeoPointSchema | None = None


class ItineraryEventSchema(BaseModel):
    type: Literal["ride", "line_change"]
    line: int | None = None
    from_station: str | None = None
    to_station: str | None = None
    distance_m: float | None = None
    at_station: str | None = None
    from_line: int | None = None
    to_line: int | None = None
    minutes: int | None = None


class RouteSchema(BaseModel):
    status: Literal["ok", "no_route"]
    source: str
    destination: str
    path: list[str] = []
    stations: list[RouteStationSchema] = []
    events: list[ItineraryEventSchema] = []

    total_minutes: int | None = None
    total_distance_m: float | None = None
    summary: list[str] = []
    share_query: str | None = None
