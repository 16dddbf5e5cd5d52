from fastapi import APIRouter, Depends, HTTPException, status
import logging
import time

from trip_planner.journeys.schemas import JourneyRequest, JourneySearchResponse
from trip_planner.journeys.service import JourneyComposer
from trip_planner.journeys.validation import JourneyValidator
from trip_planner.dependencies import get_journey_composer

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/find-routes", response_model=JourneySearchResponse)
def find_routes(
    request: JourneyRequest,
    composer: JourneyComposer = Depends(get_journey_composer)
):
    """Find direct, 1-transfer and 2-transfer journeys between two stops"""

    start_time = time.time()

    validator = JourneyValidator()
    validation_errors = validator.validate(request)

    if validation_errors:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Source and destination are required and must differ",
                "errors": [
                    {
                        "code": error.error_code,
                        "message": error.error_message,
                        "field": error.field
                    }
                    for error in validation_errors
                ]
            }
        )

    request = validator.normalize(request)
    result = composer.find_journeys(request.source, request.destination)

    if result.is_empty():
        logger.info(f"No routes found from {request.source!r} to {request.destination!r}")

    calculation_time = int((time.time() - start_time) * 1000)  # Convert to milliseconds

    return JourneySearchResponse(
        request=request,
        direct_routes=result.direct_routes,
        one_transfer_routes=result.one_transfer_routes,
        two_transfer_routes=result.two_transfer_routes,
        total_options=result.total,
        calculation_time_ms=calculation_time
    )
