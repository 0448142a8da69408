from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from src.app.ports.output import IStationRepository
from src.domain.models import DEFAULT_LOCALE_CHAIN, StationGraph

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StationGraphStore:
    """Owns the current station graph snapshot.

    The graph is built on first use and replaced wholesale on reload. Callers
    take a snapshot with ``current()`` and keep using it for the whole
    request, so a concurrent reload never shows them a partial update.
    """

    station_repository: IStationRepository
    locale_chain: tuple[str, ...] = DEFAULT_LOCALE_CHAIN

    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )
    _graph: StationGraph | None = field(default=None, init=False, repr=False)

    def current(self) -> StationGraph:
        graph = self._graph
        if graph is not None:
            return graph

        with self._lock:
            if self._graph is None:
                self._graph = self._build()
            return self._graph

    def reload(self) -> StationGraph:
        graph = self._build()
        with self._lock:
            self._graph = graph
        logger.info("Station graph reloaded: %d stations", len(graph))
        return graph

    def _build(self) -> StationGraph:
        raw = self.station_repository.load_dataset()
        return StationGraph.build(raw, locale_chain=self.locale_chain)
