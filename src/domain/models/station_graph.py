from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Sequence

import networkx as nx

from src.domain.exceptions import InvalidStation, MalformedDatasetError

from .geo import GeoPoint
from .station import Station

logger = logging.getLogger(__name__)

# Persian names first, as published by the dataset, then English.
DEFAULT_LOCALE_CHAIN: tuple[str, ...] = ("fa", "en")


class StationGraph:
    """Read-only station network.

    Stations are kept in dataset order. Adjacency is held in an undirected,
    frozen ``networkx.Graph``: a relation listed by either endpoint makes the
    edge traversable from both ends. Instances are never mutated after
    construction, so concurrent searches can share one without locking.
    """

    __slots__ = ("_stations", "_graph", "locale_chain", "dropped_relations")

    def __init__(
        self,
        stations: Mapping[str, Station],
        *,
        locale_chain: Sequence[str] = DEFAULT_LOCALE_CHAIN,
        dropped_relations: Sequence[tuple[str, str]] = (),
    ) -> None:
        self._stations: dict[str, Station] = dict(stations)
        self.locale_chain: tuple[str, ...] = tuple(locale_chain)
        self.dropped_relations: tuple[tuple[str, str], ...] = tuple(
            dropped_relations
        )

        graph = nx.Graph()
        graph.add_nodes_from(self._stations)
        for station in self._stations.values():
            for other in station.relations:
                if other in self._stations and other != station.key:
                    graph.add_edge(station.key, other)
        self._graph = nx.freeze(graph)

    @classmethod
    def build(
        cls,
        raw_dataset: Any,
        *,
        locale_chain: Sequence[str] = DEFAULT_LOCALE_CHAIN,
    ) -> StationGraph:
        """Validate and normalize a raw station dataset.

        Structural problems raise MalformedDatasetError. Dangling relations,
        self-relations and unusable coordinates are dropped and logged.
        """

        if not isinstance(raw_dataset, Mapping):
            raise MalformedDatasetError(
                f"Station dataset must be a mapping, got {type(raw_dataset).__name__}"
            )

        for key in raw_dataset:
            if not isinstance(key, str) or not key.strip():
                raise MalformedDatasetError(f"Invalid station key: {key!r}")

        stations: dict[str, Station] = {}
        dropped: list[tuple[str, str]] = []
        for key, record in raw_dataset.items():
            station, dangling = _parse_station(key, record, raw_dataset)
            stations[key] = station
            dropped.extend((key, other) for other in dangling)

        if dropped:
            logger.warning(
                "Dropped %d dangling station relation(s): %s",
                len(dropped),
                ", ".join(f"{a}->{b}" for a, b in dropped),
            )

        graph = cls(stations, locale_chain=locale_chain, dropped_relations=dropped)
        logger.info(
            "Built station graph: %d stations, %d edges",
            len(graph),
            graph.edge_count,
        )
        return graph

    def __contains__(self, key: object) -> bool:
        return key in self._stations

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._stations)

    def __getitem__(self, key: str) -> Station:
        try:
            return self._stations[key]
        except KeyError:
            raise InvalidStation(key) from None

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def get(self, key: str) -> Station | None:
        return self._stations.get(key)

    def stations(self) -> tuple[Station, ...]:
        return tuple(self._stations.values())

    def neighbors(self, key: str) -> tuple[str, ...]:
        if key not in self._graph:
            return ()
        return tuple(self._graph.adj[key])

    def has_edge(self, a: str, b: str) -> bool:
        return self._graph.has_edge(a, b)

    def display_name(
        self, key: str, locale_preference: str | Sequence[str] | None = None
    ) -> str:
        station = self._stations.get(key)
        if station is None:
            return key
        return station.name(self._locales(locale_preference))

    def _locales(
        self, locale_preference: str | Sequence[str] | None
    ) -> tuple[str, ...]:
        if locale_preference is None:
            preferred: tuple[str, ...] = ()
        elif isinstance(locale_preference, str):
            preferred = (locale_preference,)
        else:
            preferred = tuple(locale_preference)
        return preferred + tuple(
            locale for locale in self.locale_chain if locale not in preferred
        )


def _parse_station(
    key: str, record: Any, dataset: Mapping[str, Any]
) -> tuple[Station, list[str]]:
    if not isinstance(record, Mapping):
        raise MalformedDatasetError(f"Station {key!r}: record must be a mapping")

    lines = _parse_lines(key, record.get("lines"))

    raw_translations = record.get("translations") or {}
    if not isinstance(raw_translations, Mapping):
        raise MalformedDatasetError(f"Station {key!r}: translations must be a mapping")
    translations = {
        str(locale): str(name)
        for locale, name in raw_translations.items()
        if isinstance(name, str)
    }

    raw_relations = record.get("relations") or []
    if isinstance(raw_relations, (str, bytes)) or not isinstance(
        raw_relations, Sequence
    ):
        raise MalformedDatasetError(f"Station {key!r}: relations must be a list")

    relations: list[str] = []
    dangling: list[str] = []
    for other in raw_relations:
        if other == key:
            logger.warning("Station %r lists itself as a relation", key)
            continue
        if not isinstance(other, str) or other not in dataset:
            dangling.append(str(other))
            continue
        if other not in relations:
            relations.append(other)

    try:
        location = GeoPoint.from_raw(record.get("latitude"), record.get("longitude"))
    except ValueError as exc:
        logger.warning("Station %r: ignoring coordinates (%s)", key, exc)
        location = None

    station = Station(
        key=key,
        lines=lines,
        translations=translations,
        relations=tuple(relations),
        location=location,
    )
    return station, dangling


def _parse_lines(key: str, raw: Any) -> tuple[int, ...]:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or not raw:
        raise MalformedDatasetError(f"Station {key!r}: missing line membership")

    lines: list[int] = []
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise MalformedDatasetError(f"Station {key!r}: invalid line {value!r}")
        if value not in lines:
            lines.append(value)
    return tuple(lines)
