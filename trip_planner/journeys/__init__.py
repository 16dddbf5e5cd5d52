"""
Journey Planning Module

Combines legs into complete journeys with zero, one or two transfers.
Transfers are only considered at a fixed list of hub stations, and results
are returned in discovery order, capped per transfer count.

Key Components:
- service.py: JourneyComposer, the direct / 1-transfer / 2-transfer search
- validation.py: request validation at the HTTP boundary
- router.py: FastAPI endpoint for journey search
- schemas.py: Pydantic models for journeys, requests and responses
"""

from .router import router
from .service import JourneyComposer, JourneyLimits
from .validation import JourneyValidator
from .schemas import (
    DirectJourney, OneTransferJourney, TwoTransferJourney,
    JourneySearchResult, JourneySearchResponse, JourneyRequest, ValidationIssue
)

__all__ = [
    "router",
    "JourneyComposer",
    "JourneyLimits",
    "JourneyValidator",
    "DirectJourney",
    "OneTransferJourney",
    "TwoTransferJourney",
    "JourneySearchResult",
    "JourneySearchResponse",
    "JourneyRequest",
    "ValidationIssue"
]
