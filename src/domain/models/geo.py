from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    @classmethod
    def from_raw(cls, lat: Any, lon: Any) -> GeoPoint | None:
        """Coordinates from loosely typed dataset values.

        Returns None when either value is missing. Numeric strings are
        accepted. Raises ValueError for anything unparseable or out of range.
        """

        if lat is None or lon is None or lat == "" or lon == "":
            return None
        if isinstance(lat, bool) or isinstance(lon, bool):
            raise ValueError(f"Invalid coordinates: {lat!r}, {lon!r}")
        try:
            return cls(lat=float(lat), lon=float(lon))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid coordinates: {lat!r}, {lon!r}") from exc
