"""Tests for the route index and dataset loader."""

import json
from pathlib import Path

import pytest

from tests.factories import make_bus, make_train
from trip_planner.config import DEFAULT_DATA_DIR
from trip_planner.routes.index import DatasetError, RouteIndex, load_route_index
from trip_planner.routes.schemas import BusRoute, TrainRoute
from trip_planner.stations.schemas import StationRecord


def _write(path: Path, payload) -> None:
    path.write_text(json.dumps(payload))


def test_index_preserves_route_order_and_lookup() -> None:
    """Given routes, when indexing, then order is preserved and routes are found by id."""
    routes = [make_bus("B1", ["A", "B"]), make_train("T1", [("B", "08:00"), ("C", "08:10")])]

    index = RouteIndex(routes)

    assert [route.id for route in index] == ["B1", "T1"]
    assert len(index) == 2
    assert index.get("T1") is routes[1]
    assert index.get("missing") is None


def test_index_rejects_duplicate_route_ids() -> None:
    """Given two routes sharing an id, when indexing, then a dataset error is raised."""
    with pytest.raises(DatasetError, match="Duplicate route id 'B1'"):
        RouteIndex([make_bus("B1", ["A", "B"]), make_bus("B1", ["C", "D"])])


def test_excluding_drops_given_route_ids_in_order() -> None:
    """Given an index, when excluding ids, then the remaining routes keep their order."""
    index = RouteIndex([make_bus(f"B{i}", ["A", "B"]) for i in range(4)])

    remaining = index.excluding({"B0", "B2"})

    assert [route.id for route in remaining] == ["B1", "B3"]
    assert len(index) == 4


def test_stations_are_derived_from_routes_when_not_given() -> None:
    """Given no station list, when indexing, then stop names are collected once in route order."""
    index = RouteIndex([
        make_bus("B1", ["Guindy", "Saidapet"]),
        make_train("T1", [("saidapet", "08:00"), ("Central Station", "08:20")]),
    ])

    assert [station.name for station in index.stations] == ["Guindy", "Saidapet", "Central Station"]


def test_empty_index_has_no_routes_or_stations() -> None:
    index = RouteIndex.empty()

    assert len(index) == 0
    assert index.stations == ()


def test_load_puts_bus_routes_before_train_routes(data_dir: Path) -> None:
    """Given bus and train files, when loading, then bus routes come first."""
    index = load_route_index(data_dir)

    assert [route.id for route in index] == ["B1", "T1"]
    assert isinstance(index.get("B1"), BusRoute)
    assert isinstance(index.get("T1"), TrainRoute)


def test_load_reads_optional_station_file(data_dir: Path) -> None:
    """Given a stations file with names and objects, when loading, then both forms are accepted."""
    _write(data_dir / "stations.json", ["Guindy", {"name": "Saidapet", "lat": 13.02, "lng": 80.22}])

    index = load_route_index(data_dir)

    assert index.stations == (
        StationRecord(name="Guindy"),
        StationRecord(name="Saidapet", lat=13.02, lng=80.22),
    )


def test_load_fails_when_file_is_missing(tmp_path: Path) -> None:
    """Given no dataset files, when loading, then a dataset error names the missing file."""
    with pytest.raises(DatasetError, match="bus_routes.json"):
        load_route_index(tmp_path)


def test_load_fails_on_malformed_json(data_dir: Path) -> None:
    """Given a corrupt file, when loading, then a dataset error is raised."""
    (data_dir / "train_routes.json").write_text("[{not json")

    with pytest.raises(DatasetError, match="Malformed JSON"):
        load_route_index(data_dir)


def test_load_fails_on_route_with_single_stop(data_dir: Path) -> None:
    """Given a route with fewer than two stops, when loading, then a dataset error is raised."""
    _write(data_dir / "bus_routes.json", [{
        "id": "B9",
        "name": "Short",
        "type": "bus",
        "stops": ["Only"],
        "first_bus": "06:00",
        "last_bus": "22:00",
        "frequency_peak": "10 min",
    }])

    with pytest.raises(DatasetError, match="Invalid records"):
        load_route_index(data_dir)


def test_load_fails_on_train_stop_without_time(data_dir: Path) -> None:
    _write(data_dir / "train_routes.json", [{
        "id": "T9",
        "name": "Broken",
        "type": "train",
        "stops": [{"name": "A"}, {"name": "B", "time": "08:00"}],
    }])

    with pytest.raises(DatasetError):
        load_route_index(data_dir)


def test_bundled_dataset_loads() -> None:
    """Given the packaged dataset, when loading, then routes and stations are available."""
    index = load_route_index(DEFAULT_DATA_DIR)

    assert len(index) > 0
    assert len(index.stations) > 0
    assert all(len(route.stops) >= 2 for route in index)
