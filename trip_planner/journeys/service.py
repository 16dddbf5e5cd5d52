import logging
from dataclasses import dataclass
from typing import List, Sequence

from trip_planner.config import settings
from trip_planner.journeys.schemas import (
    DirectJourney, JourneySearchResult, OneTransferJourney, TwoTransferJourney
)
from trip_planner.routes.index import RouteIndex
from trip_planner.routes.service import find_legs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JourneyLimits:
    """Maximum number of journeys returned per transfer count"""
    direct: int = 3
    one_transfer: int = 3
    two_transfer: int = 2

    @classmethod
    def from_settings(cls) -> "JourneyLimits":
        return cls(
            direct=settings.MAX_DIRECT_ROUTES,
            one_transfer=settings.MAX_ONE_TRANSFER_ROUTES,
            two_transfer=settings.MAX_TWO_TRANSFER_ROUTES
        )


class JourneyComposer:
    """Builds direct, 1-transfer and 2-transfer journeys through a fixed hub list.

    Transfers are only considered at the configured hubs, which keeps the
    search bounded by (hubs^2 x routes) instead of exploring the whole
    network. Journeys are returned in discovery order (route index order,
    then hub list order) and truncated to the configured limits; no ranking
    is applied.
    """

    def __init__(self, route_index: RouteIndex, hubs: Sequence[str], limits: JourneyLimits = JourneyLimits()):
        self.route_index = route_index
        self.hubs = tuple(hubs)
        self.limits = limits

    def find_journeys(self, source: str, destination: str) -> JourneySearchResult:
        """Find journeys from source to destination with at most two transfers"""
        hubs = self._candidate_hubs(source, destination)

        result = JourneySearchResult(
            direct_routes=self._find_direct(source, destination),
            one_transfer_routes=self._find_one_transfer(source, destination, hubs),
            two_transfer_routes=self._find_two_transfer(source, destination, hubs)
        )

        logger.debug(
            f"Search {source!r} -> {destination!r}: {len(result.direct_routes)} direct, "
            f"{len(result.one_transfer_routes)} 1-transfer, "
            f"{len(result.two_transfer_routes)} 2-transfer"
        )
        return result

    def _candidate_hubs(self, source: str, destination: str) -> List[str]:
        """Hubs usable for this query, excluding the source and destination themselves"""
        excluded = {source.lower(), destination.lower()}
        return [hub for hub in self.hubs if hub.lower() not in excluded]

    def _find_direct(self, source: str, destination: str) -> List[DirectJourney]:
        legs = find_legs(source, destination, self.route_index.routes)
        return [DirectJourney(leg=leg) for leg in legs][:self.limits.direct]

    def _find_one_transfer(
        self,
        source: str,
        destination: str,
        hubs: List[str]
    ) -> List[OneTransferJourney]:
        journeys = []

        for hub in hubs:
            leg1s = find_legs(source, hub, self.route_index.routes)
            if not leg1s:
                continue

            # A second leg on a route already used to reach the hub is not a transfer
            used_route_ids = {leg.route_id for leg in leg1s}
            leg2s = find_legs(hub, destination, self.route_index.excluding(used_route_ids))

            for leg1 in leg1s:
                for leg2 in leg2s:
                    journeys.append(OneTransferJourney(hub=hub, leg1=leg1, leg2=leg2))

        return journeys[:self.limits.one_transfer]

    def _find_two_transfer(
        self,
        source: str,
        destination: str,
        hubs: List[str]
    ) -> List[TwoTransferJourney]:
        journeys = []
        routes = self.route_index.routes

        for hub_a in hubs:
            leg1s = find_legs(source, hub_a, routes)
            if not leg1s:
                continue

            for hub_b in hubs:
                if hub_b.lower() == hub_a.lower():
                    continue

                leg2s = find_legs(hub_a, hub_b, routes)
                if not leg2s:
                    continue

                leg3s = find_legs(hub_b, destination, routes)

                # Only adjacent legs must differ; leg1 and leg3 may share a route
                for leg1 in leg1s:
                    for leg2 in leg2s:
                        if leg1.route_id == leg2.route_id:
                            continue
                        for leg3 in leg3s:
                            if leg2.route_id == leg3.route_id:
                                continue
                            journeys.append(TwoTransferJourney(
                                hub_a=hub_a,
                                hub_b=hub_b,
                                leg1=leg1,
                                leg2=leg2,
                                leg3=leg3
                            ))

        return journeys[:self.limits.two_transfer]
