class RoutingError(Exception):
    """Base exception for route calculation failures."""


class InvalidStation(RoutingError):
    """Raised when a station key is not part of the station graph."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown station: {key}")
        self.key = key
