from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class IStationRepository(ABC):
    """Port for loading the raw station dataset.

    Implementations only fetch and decode; validation happens when the
    station graph is built.
    """

    @abstractmethod
    def load_dataset(self) -> Mapping[str, Any]:
        raise NotImplementedError
