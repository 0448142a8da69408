from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from src.app.ports.output import IStationRepository
from src.domain.exceptions import MalformedDatasetError


@dataclass(slots=True)
class LocalStationRepository(IStationRepository):
    """Loads the station dataset from a JSON file.

    Env vars:
      - METRO_STATIONS_PATH: path to stations.json (default data/stations.json)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("METRO_STATIONS_PATH") or "data/stations.json"
        return Path(value)

    def load_dataset(self) -> Mapping[str, Any]:
        path = self._path()
        with path.open("r", encoding="utf-8") as fp:
            try:
                return json.load(fp)
            except json.JSONDecodeError as exc:
                raise MalformedDatasetError(
                    f"Station dataset {path} is not valid JSON: {exc}"
                ) from exc
