"""Get truck by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from fleet_lite.domain.errors import NotFoundError, ValidationError
from fleet_lite.domain.truck import Truck
from fleet_lite.ports.truck_repository import TruckRepository


def validate_truck_id(truck_id: str) -> None:
    """
    Raises:
        ValidationError: If truck_id is not a valid UUID
    """
    try:
        UUID(truck_id)
    except ValueError:
        raise ValidationError(
            errors=[
                {
                    "field": "truck_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ]
        )


@dataclass(frozen=True, slots=True)
class GetTruckByIdRequest:
    truck_id: str


@dataclass(frozen=True, slots=True)
class GetTruckByIdResponse:
    truck: Truck


class GetTruckById:
    """
    Use case for retrieving a single truck by ID.

    Responsibilities:
    - Validate truck_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the truck doesn't exist
    """

    def __init__(self, truck_repository: TruckRepository) -> None:
        self._repository = truck_repository

    def execute(self, request: GetTruckByIdRequest) -> GetTruckByIdResponse:
        """
        Raises:
            ValidationError: If truck_id is not a valid UUID format
            NotFoundError: If no truck has the given ID
        """
        validate_truck_id(request.truck_id)

        truck = self._repository.get_by_id(request.truck_id)

        if truck is None:
            raise NotFoundError(resource="Truck", identifier=request.truck_id)

        return GetTruckByIdResponse(truck=truck)
