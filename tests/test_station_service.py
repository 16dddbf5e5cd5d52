"""Tests for station listing and search."""

from tests.factories import make_bus
from trip_planner.routes.index import RouteIndex
from trip_planner.stations.schemas import StationRecord
from trip_planner.stations.service import StationService


def _service() -> StationService:
    index = RouteIndex(
        [make_bus("B1", ["Guindy", "Saidapet"])],
        [
            StationRecord(name="Guindy", lat=13.0067, lng=80.2206),
            StationRecord(name="Saidapet"),
            StationRecord(name="Saidapet Bus Stand"),
        ],
    )
    return StationService(index, hubs=["guindy", "Egmore"])


def test_stations_keep_dataset_order_and_flag_hubs() -> None:
    """Given a station list, when listing, then hubs are flagged case-insensitively."""
    stations = _service().get_stations()

    assert [(s.name, s.is_hub) for s in stations] == [
        ("Guindy", True),
        ("Saidapet", False),
        ("Saidapet Bus Stand", False),
    ]
    assert stations[0].lat == 13.0067


def test_search_matches_substrings() -> None:
    names = [s.name for s in _service().search_stations_by_name("SAID")]

    assert names == ["Saidapet", "Saidapet Bus Stand"]


def test_search_respects_limit() -> None:
    assert len(_service().search_stations_by_name("saidapet", limit=1)) == 1


def test_blank_search_returns_nothing() -> None:
    assert _service().search_stations_by_name("   ") == []


def test_hubs_are_returned_as_configured() -> None:
    assert _service().get_hubs() == ["guindy", "Egmore"]
