from .dataset import MalformedDatasetError
from .routing import InvalidStation, RoutingError

__all__ = [
    "InvalidStation",
    "MalformedDatasetError",
    "RoutingError",
]
