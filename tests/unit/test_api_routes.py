from __future__ import annotations

import httpx
import pytest

from src.adapters.api.dependencies import get_route_planner_service
from src.app.services.route_planner_service import RoutePlannerService
from src.app.services.station_graph_store import StationGraphStore
from src.main import app

_DATASET = {
    "Tajrish": {
        "translations": {"fa": "تجریش", "en": "Tajrish"},
        "lines": [1],
        "latitude": 35.8043,
        "longitude": 51.4336,
        "relations": ["Darvazeh Dowlat"],
    },
    "Darvazeh Dowlat": {
        "translations": {"en": "Darvazeh Dowlat"},
        "lines": [1, 4],
        "relations": ["Tajrish", "Ferdowsi"],
    },
    "Ferdowsi": {
        "translations": {"en": "Ferdowsi"},
        "lines": [4],
        "relations": ["Darvazeh Dowlat"],
    },
    "Island": {"translations": {"en": "Island"}, "lines": [9], "relations": []},
}


class _FakeStationRepository:
    def __init__(self, dataset) -> None:
        self.dataset = dataset

    def load_dataset(self):
        return self.dataset


def _override_with(dataset) -> None:
    store = StationGraphStore(station_repository=_FakeStationRepository(dataset))
    service = RoutePlannerService(graph_store=store)
    app.dependency_overrides[get_route_planner_service] = lambda: service


@pytest.mark.unit
@pytest.mark.anyio
async def test_post_routes_returns_itinerary() -> None:
    _override_with(_DATASET)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post(
            "/routes",
            json={"source": "Tajrish", "destination": "Ferdowsi", "locale": "en"},
        )

    app.dependency_overrides.clear()

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["status"] == "ok"
    assert payload["path"] == ["Tajrish", "Darvazeh Dowlat", "Ferdowsi"]
    assert [e["type"] for e in payload["events"]] == ["ride", "line_change", "ride"]
    assert payload["events"][1]["at_station"] == "Darvazeh Dowlat"
    assert payload["events"][1]["from_line"] == 1
    assert payload["events"][1]["minutes"] == 5
    assert payload["events"][1]["to_line"] == 4
    assert payload["total_minutes"] == 9
    assert payload["stations"][0]["location"] == {"lat": 35.8043, "lon": 51.4336}
    assert payload["stations"][1]["location"] is None
    assert payload["summary"][-1] == "Estimated travel time: ~9 min"
    assert payload["share_query"] == "source=Tajrish&destination=Ferdowsi"


@pytest.mark.unit
@pytest.mark.anyio
async def test_post_routes_unreachable_is_not_an_error() -> None:
    _override_with(_DATASET)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post(
            "/routes", json={"source": "Tajrish", "destination": "Island"}
        )

    app.dependency_overrides.clear()

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["status"] == "no_route"
    assert payload["events"] == []
    assert payload["total_minutes"] is None


@pytest.mark.unit
@pytest.mark.anyio
async def test_post_routes_unknown_station_is_404() -> None:
    _override_with(_DATASET)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post("/routes", json={"source": "X", "destination": "Tajrish"})

    app.dependency_overrides.clear()

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Unknown station: X"
    assert resp.json()["key"] == "X"


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_stations_sorted_with_names() -> None:
    _override_with(_DATASET)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/stations", params={"locale": "en"})

    app.dependency_overrides.clear()

    assert resp.status_code == 200
    payload = resp.json()
    assert [s["name"] for s in payload] == [
        "Darvazeh Dowlat",
        "Ferdowsi",
        "Island",
        "Tajrish",
    ]
    assert payload[1]["lines"] == [4]


@pytest.mark.unit
@pytest.mark.anyio
async def test_reload_stations_returns_count() -> None:
    _override_with(_DATASET)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post("/stations/reload")

    app.dependency_overrides.clear()

    assert resp.status_code == 200
    assert resp.json() == {"station_count": 4}


@pytest.mark.unit
@pytest.mark.anyio
async def test_malformed_dataset_is_reported_as_unavailable() -> None:
    _override_with({"Broken": {"lines": []}})

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/stations")

    app.dependency_overrides.clear()

    assert resp.status_code == 503
    assert resp.json()["detail"].startswith("Station data unavailable")
    assert "missing line membership" in resp.json()["detail"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_health() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")

    assert resp.json() == {"status": "ok"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_unhandled_error_is_reported_as_json_500() -> None:
    class _BrokenService:
        def list_stations(self, *, locale=None):
            raise RuntimeError("graph store offline")

    app.dependency_overrides[get_route_planner_service] = lambda: _BrokenService()

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/stations")

    app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"detail": "graph store offline"}
