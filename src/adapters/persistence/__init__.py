from .local_station_repository import LocalStationRepository

__all__ = [
    "LocalStationRepository",
]
