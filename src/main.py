from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.routes import router as routes_router
from src.adapters.api.controllers.stations import router as stations_router
from src.domain.exceptions import InvalidStation, MalformedDatasetError

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="Metro Route Finder")
app.include_router(routes_router)
app.include_router(stations_router)


def _reveal_errors() -> bool:
    return (os.getenv("METRO_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }


@app.exception_handler(InvalidStation)
async def invalid_station_handler(request: Request, exc: InvalidStation) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc), "key": exc.key})


@app.exception_handler(MalformedDatasetError)
async def malformed_dataset_handler(
    request: Request, exc: MalformedDatasetError
) -> JSONResponse:
    """The station dataset could not be loaded; routing is unavailable until a reload."""

    logger.error("Station dataset rejected: %s", exc, extra={"path": str(request.url.path)})
    return JSONResponse(
        status_code=503, content={"detail": f"Station data unavailable: {exc}"}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the frontend can display them."""

    logger.exception("Unhandled exception", extra={"path": str(request.url.path)})

    if _reveal_errors() or isinstance(exc, (FileNotFoundError, RuntimeError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
