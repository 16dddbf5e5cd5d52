from typing import List

from trip_planner.journeys.schemas import JourneyRequest, ValidationIssue


class JourneyValidator:
    """Validates journey search requests before they reach the composer"""

    def validate(self, request: JourneyRequest) -> List[ValidationIssue]:
        errors = []

        source = (request.source or "").strip()
        destination = (request.destination or "").strip()

        if not source:
            errors.append(ValidationIssue(
                error_code="MISSING_SOURCE",
                error_message="Source is required",
                field="source"
            ))

        if not destination:
            errors.append(ValidationIssue(
                error_code="MISSING_DESTINATION",
                error_message="Destination is required",
                field="destination"
            ))

        if source and destination and source.lower() == destination.lower():
            errors.append(ValidationIssue(
                error_code="SAME_STATION",
                error_message="Source and destination cannot be the same",
                field="destination"
            ))

        return errors

    @staticmethod
    def normalize(request: JourneyRequest) -> JourneyRequest:
        """Strip surrounding whitespace from a validated request"""
        return JourneyRequest(
            source=request.source.strip(),
            destination=request.destination.strip()
        )
