from typing import Iterable, List

from trip_planner.routes.schemas import Leg, Route


def _position(names_lower: List[str], name_lower: str) -> int:
    try:
        return names_lower.index(name_lower)
    except ValueError:
        return -1


def find_legs(source: str, destination: str, routes: Iterable[Route]) -> List[Leg]:
    """Find every route that can be ridden from source to destination.

    Stop names are compared case-insensitively. A route only matches in the
    direction its stops are listed, so the destination must come strictly
    after the source. Each matching route yields one Leg covering the stops
    from source to destination inclusive; routes are scanned in the given
    order and all matches are returned.
    """
    source_lower = source.lower()
    destination_lower = destination.lower()

    legs = []
    for route in routes:
        names_lower = [name.lower() for name in route.stop_names()]
        source_index = _position(names_lower, source_lower)
        destination_index = _position(names_lower, destination_lower)

        if source_index > -1 and destination_index > source_index:
            journey_stops = list(route.stops[source_index:destination_index + 1])
            legs.append(Leg(
                route=route,
                journey_stops=journey_stops,
                timings=route.extract_timings(journey_stops)
            ))
    return legs
