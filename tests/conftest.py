"""Shared fixtures for trip planner tests."""

import json
from pathlib import Path

import pytest

from tests.factories import make_bus, make_train
from trip_planner.routes.index import RouteIndex
from trip_planner.routes.schemas import BusRoute, TrainRoute


@pytest.fixture
def train_t1() -> TrainRoute:
    return make_train(
        "T1",
        [("Guindy", "08:00"), ("Saidapet", "08:10"), ("Central Station", "08:30")],
    )


@pytest.fixture
def bus_b1() -> BusRoute:
    return make_bus("B1", ["Saidapet", "T. Nagar"])


@pytest.fixture
def scenario_index(train_t1: TrainRoute, bus_b1: BusRoute) -> RouteIndex:
    return RouteIndex([train_t1, bus_b1])


@pytest.fixture
def data_dir(tmp_path: Path, train_t1: TrainRoute, bus_b1: BusRoute) -> Path:
    """Dataset directory holding the scenario routes as JSON files."""
    (tmp_path / "bus_routes.json").write_text(json.dumps([bus_b1.model_dump()]))
    (tmp_path / "train_routes.json").write_text(json.dumps([train_t1.model_dump()]))
    return tmp_path
