from .itinerary_builder import (
    TIME_PER_LINE_CHANGE_MIN,
    TIME_PER_STATION_MIN,
    build_itinerary,
)
from .path_search import shortest_path

__all__ = [
    "TIME_PER_LINE_CHANGE_MIN",
    "TIME_PER_STATION_MIN",
    "build_itinerary",
    "shortest_path",
]
