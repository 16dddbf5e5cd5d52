from fastapi import APIRouter, Depends, Query

from trip_planner.config import settings
from trip_planner.dependencies import get_route_index
from trip_planner.routes.index import RouteIndex
from trip_planner.stations.schemas import HubList, StationList
from trip_planner.stations.service import StationService

router = APIRouter()


def get_station_service(route_index: RouteIndex = Depends(get_route_index)) -> StationService:
    return StationService(route_index, settings.MAJOR_HUBS)


@router.get("/stations", response_model=StationList)
def get_stations(service: StationService = Depends(get_station_service)):
    """List every known station"""
    stations = service.get_stations()
    return StationList(stations=stations, total=len(stations))


@router.get("/stations/search", response_model=StationList)
def search_stations(
    q: str = Query(..., min_length=1, description="Search query"),
    limit: int = Query(10, ge=1, le=50, description="Maximum number of results"),
    service: StationService = Depends(get_station_service)
):
    """Search stations by name for autocomplete"""
    stations = service.search_stations_by_name(q, limit=limit)
    return StationList(stations=stations, total=len(stations))


@router.get("/hubs", response_model=HubList)
def get_hubs(service: StationService = Depends(get_station_service)):
    """Transfer hubs in search order"""
    hubs = service.get_hubs()
    return HubList(hubs=hubs, total=len(hubs))
