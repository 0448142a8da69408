from __future__ import annotations

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class StationSchema(BaseModel):
    key: str
    name: str
    lines: list[int]
    location: GeoPointSchema | None = None


class ReloadResponseSchema(BaseModel):
    station_count: int
