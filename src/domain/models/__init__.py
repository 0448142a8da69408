from .geo import GeoPoint
from .itinerary import Itinerary, ItineraryEvent, LineChange, RideSegment
from .path import NoPathFound, StationPath
from .station import Station
from .station_graph import DEFAULT_LOCALE_CHAIN, StationGraph

__all__ = [
    "DEFAULT_LOCALE_CHAIN",
    "GeoPoint",
    "Itinerary",
    "ItineraryEvent",
    "LineChange",
    "NoPathFound",
    "RideSegment",
    "Station",
    "StationGraph",
    "StationPath",
]
