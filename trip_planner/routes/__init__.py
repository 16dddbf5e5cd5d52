"""
Route Index and Leg Finder

This module holds the static transit dataset and the search over it:

- schemas.py: bus and train route models, timings and the Leg value
- index.py: the read-only Route Index and the JSON dataset loader
- service.py: finding every route that serves a stop pair in order

The Route Index is loaded once at startup and never mutated, so it can be
shared by concurrent requests without locking.
"""

from .schemas import BusRoute, TrainRoute, TrainStop, Route, Leg, BusTimings, TrainTimings
from .index import RouteIndex, DatasetError, load_route_index
from .service import find_legs

__all__ = [
    "BusRoute",
    "TrainRoute",
    "TrainStop",
    "Route",
    "Leg",
    "BusTimings",
    "TrainTimings",
    "RouteIndex",
    "DatasetError",
    "load_route_index",
    "find_legs"
]
