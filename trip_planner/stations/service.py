from typing import List, Sequence

from trip_planner.routes.index import RouteIndex
from trip_planner.stations.schemas import Station


class StationService:
    """Station listing and lookup over the loaded dataset"""

    def __init__(self, route_index: RouteIndex, hubs: Sequence[str]):
        self.route_index = route_index
        self.hubs = list(hubs)
        self._hub_keys = {hub.lower() for hub in hubs}

    def get_stations(self) -> List[Station]:
        """All stations in dataset order, flagged when they are transfer hubs"""
        return [
            Station(
                name=record.name,
                lat=record.lat,
                lng=record.lng,
                is_hub=record.name.lower() in self._hub_keys
            )
            for record in self.route_index.stations
        ]

    def search_stations_by_name(self, name: str, limit: int = 10) -> List[Station]:
        """Search stations by name for autocomplete"""
        query = name.strip().lower()
        if not query:
            return []
        matches = [station for station in self.get_stations() if query in station.name.lower()]
        return matches[:limit]

    def get_hubs(self) -> List[str]:
        return list(self.hubs)
