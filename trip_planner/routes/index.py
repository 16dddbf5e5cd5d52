import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from pydantic import TypeAdapter, ValidationError

from trip_planner.routes.schemas import BusRoute, Route, TrainRoute
from trip_planner.stations.schemas import StationRecord

logger = logging.getLogger(__name__)

BUS_ROUTES_FILE = "bus_routes.json"
TRAIN_ROUTES_FILE = "train_routes.json"
STATIONS_FILE = "stations.json"

_bus_routes_adapter = TypeAdapter(List[BusRoute])
_train_routes_adapter = TypeAdapter(List[TrainRoute])
_stations_adapter = TypeAdapter(List[StationRecord])


class DatasetError(Exception):
    """Raised when the static transit dataset cannot be loaded"""


class RouteIndex:
    """Read-only, ordered collection of every known bus and train route.

    Built once at startup and shared by all requests. Route order is the
    discovery order used by the journey search, so it is preserved exactly
    as given.
    """

    def __init__(self, routes: Iterable[Route], stations: Optional[Iterable[StationRecord]] = None):
        self._routes: Tuple[Route, ...] = tuple(routes)
        self._by_id: Dict[str, Route] = {}
        for route in self._routes:
            if route.id in self._by_id:
                raise DatasetError(f"Duplicate route id '{route.id}'")
            self._by_id[route.id] = route

        if stations is None:
            stations = self._stations_from_routes()
        self._stations: Tuple[StationRecord, ...] = tuple(stations)

    @classmethod
    def empty(cls) -> "RouteIndex":
        return cls([], [])

    @property
    def routes(self) -> Tuple[Route, ...]:
        return self._routes

    @property
    def stations(self) -> Tuple[StationRecord, ...]:
        return self._stations

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def get(self, route_id: str) -> Optional[Route]:
        return self._by_id.get(route_id)

    def excluding(self, route_ids: Set[str]) -> Tuple[Route, ...]:
        """Routes whose id is not in route_ids, in index order"""
        return tuple(route for route in self._routes if route.id not in route_ids)

    def _stations_from_routes(self) -> List[StationRecord]:
        # First spelling of each stop name wins
        seen: Set[str] = set()
        stations = []
        for route in self._routes:
            for name in route.stop_names():
                key = name.lower()
                if key not in seen:
                    seen.add(key)
                    stations.append(StationRecord(name=name))
        return stations


def _read_json(path: Path):
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DatasetError(f"Dataset file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Malformed JSON in {path}: {e}") from e


def _validate(adapter: TypeAdapter, payload, path: Path):
    try:
        return adapter.validate_python(payload)
    except ValidationError as e:
        raise DatasetError(f"Invalid records in {path}: {e.error_count()} error(s)\n{e}") from e


def load_route_index(data_dir: Path) -> RouteIndex:
    """Load bus routes, train routes and (optionally) stations from data_dir.

    Bus routes come first, followed by train routes. When no stations file
    is present the station list is derived from the routes' stops.
    """
    data_dir = Path(data_dir)

    bus_path = data_dir / BUS_ROUTES_FILE
    train_path = data_dir / TRAIN_ROUTES_FILE
    bus_routes = _validate(_bus_routes_adapter, _read_json(bus_path), bus_path)
    train_routes = _validate(_train_routes_adapter, _read_json(train_path), train_path)

    stations = None
    stations_path = data_dir / STATIONS_FILE
    if stations_path.exists():
        stations = _validate(_stations_adapter, _read_json(stations_path), stations_path)

    index = RouteIndex([*bus_routes, *train_routes], stations)
    logger.info(
        f"Loaded {len(bus_routes)} bus route(s), {len(train_routes)} train route(s) "
        f"and {len(index.stations)} station(s) from {data_dir}"
    )
    return index
