from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from src.app.ports.output import IStationRepository
from src.domain.exceptions import MalformedDatasetError

DEFAULT_STATIONS_URL = (
    "https://m4tinbeigi-official.github.io/tehran-metro-data/data/stations.json"
)


@dataclass(slots=True)
class HttpStationRepository(IStationRepository):
    """Fetches the station dataset as JSON over HTTP.

    Env vars:
      - METRO_STATIONS_URL: dataset URL (default: public Tehran metro dataset)
      - METRO_STATIONS_TIMEOUT_S: request timeout (default 10)

    Notes:
      - No caching or retries here; the graph store loads once per reload.
    """

    url: str | None = None
    timeout_s: float = 10.0
    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        if self.url is None:
            self.url = os.getenv("METRO_STATIONS_URL") or DEFAULT_STATIONS_URL
        if os.getenv("METRO_STATIONS_TIMEOUT_S"):
            self.timeout_s = float(os.environ["METRO_STATIONS_TIMEOUT_S"])

    def load_dataset(self) -> Mapping[str, Any]:
        with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
            resp = client.get(self.url)
            resp.raise_for_status()
            try:
                return resp.json()
            except ValueError as exc:
                raise MalformedDatasetError(
                    f"Station dataset at {self.url} is not valid JSON"
                ) from exc
