from fastapi import Depends, Request

from trip_planner.config import settings
from trip_planner.journeys.service import JourneyComposer, JourneyLimits
from trip_planner.routes.index import RouteIndex


def get_route_index(request: Request) -> RouteIndex:
    """Route index loaded at startup"""
    route_index = getattr(request.app.state, "route_index", None)
    if route_index is None:
        return RouteIndex.empty()
    return route_index


def get_journey_composer(route_index: RouteIndex = Depends(get_route_index)) -> JourneyComposer:
    return JourneyComposer(
        route_index,
        hubs=settings.MAJOR_HUBS,
        limits=JourneyLimits.from_settings()
    )
