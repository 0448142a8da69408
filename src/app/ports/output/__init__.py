from .station_repository import IStationRepository

__all__ = [
    "IStationRepository",
]
