from pydantic import BaseModel
from typing import List, Literal, Optional

from trip_planner.routes.schemas import Leg


class DirectJourney(BaseModel):
    type: Literal["direct"] = "direct"
    leg: Leg

    @property
    def legs(self) -> List[Leg]:
        return [self.leg]


class OneTransferJourney(BaseModel):
    type: Literal["1-transfer"] = "1-transfer"
    hub: str
    leg1: Leg
    leg2: Leg

    @property
    def legs(self) -> List[Leg]:
        return [self.leg1, self.leg2]


class TwoTransferJourney(BaseModel):
    type: Literal["2-transfer"] = "2-transfer"
    hub_a: str
    hub_b: str
    leg1: Leg
    leg2: Leg
    leg3: Leg

    @property
    def legs(self) -> List[Leg]:
        return [self.leg1, self.leg2, self.leg3]


class JourneySearchResult(BaseModel):
    """Journeys grouped by number of transfers, in discovery order"""
    direct_routes: List[DirectJourney] = []
    one_transfer_routes: List[OneTransferJourney] = []
    two_transfer_routes: List[TwoTransferJourney] = []

    @property
    def total(self) -> int:
        return len(self.direct_routes) + len(self.one_transfer_routes) + len(self.two_transfer_routes)

    def is_empty(self) -> bool:
        return self.total == 0


class JourneyRequest(BaseModel):
    """Request schema for journey search"""
    source: Optional[str] = None
    destination: Optional[str] = None


class JourneySearchResponse(JourneySearchResult):
    """Response schema for journey search"""
    request: JourneyRequest
    total_options: int
    calculation_time_ms: int


class ValidationIssue(BaseModel):
    """Journey request validation error details"""
    error_code: str
    error_message: str
    field: Optional[str] = None
