from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_route_planner_service
from src.adapters.api.schemas.routes import (
    ItineraryEventSchema,
    RouteRequestSchema,
    RouteSchema,
    RouteStationSchema,
)
from src.adapters.api.schemas.stations import GeoPointSchema
from src.app.services.route_planner_service import RoutePlan, RoutePlannerService
from src.domain.models import ItineraryEvent, LineChange, NoPathFound, RideSegment

router = APIRouter(tags=["routes"])


def _event_to_schema(event: ItineraryEvent) -> ItineraryEventSchema:
    if isinstance(event, LineChange):
        return ItineraryEventSchema(
            type="line_change",
            at_station=event.at_station,
            from_line=event.from_line,
            to_line=event.to_line,
            minutes=event.minutes,
        )
    if isinstance(event, RideSegment):
        return ItineraryEventSchema(
            type="ride",
            line=event.line,
            from_station=event.from_station,
            to_station=event.to_station,
            distance_m=event.distance_m,
        )
    raise TypeError(f"Unsupported itinerary event: {event!r}")


def _plan_to_schema(plan: RoutePlan) -> RouteSchema:
    itinerary = plan.itinerary
    return RouteSchema(
        status="ok",
        source=itinerary.source,
        destination=itinerary.destination,
        path=list(itinerary.path),
        stations=[
            RouteStationSchema(
                key=station.key,
                name=plan.names[station.key],
                location=(
                    GeoPointSchema(lat=station.location.lat, lon=station.location.lon)
                    if station.location
                    else None
                ),
            )
            for station in plan.stations
        ],
        events=[_event_to_schema(e) for e in itinerary.events],
        total_minutes=itinerary.total_minutes,
        total_distance_m=itinerary.total_distance_m,
        summary=[plan.summary.title, *plan.summary.steps],
        share_query=plan.share_query,
    )


@router.post("/routes", response_model=RouteSchema)
def calculate_route(
    req: RouteRequestSchema,
    service: RoutePlannerService = Depends(get_route_planner_service),
) -> RouteSchema:
    plan = service.plan_route(
        source=req.source, destination=req.destination, locale=req.locale
    )

    if isinstance(plan, NoPathFound):
        return RouteSchema(
            status="no_route", source=plan.source, destination=plan.destination
        )
    return _plan_to_schema(plan)
