"""Create and update truck use cases.

Both share the same guardrails: the draft is validated first, then the
license number must not belong to another truck.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fleet_lite.domain.errors import ConflictError, NotFoundError
from fleet_lite.domain.truck import Truck, TruckDraft
from fleet_lite.ports.truck_repository import TruckRepository
from fleet_lite.use_cases.get_truck_by_id import validate_truck_id

logger = logging.getLogger(__name__)


def _ensure_license_number_free(
    repository: TruckRepository, license_number: str, truck_id: str | None = None
) -> None:
    existing = repository.find_by_license_number(license_number)
    if existing is not None and existing.id != truck_id:
        raise ConflictError(
            f"License number '{license_number}' is already registered",
            field="license_number",
            existing_id=existing.id,
        )


@dataclass(frozen=True, slots=True)
class CreateTruckRequest:
    draft: TruckDraft


@dataclass(frozen=True, slots=True)
class UpdateTruckRequest:
    truck_id: str
    draft: TruckDraft


@dataclass(frozen=True, slots=True)
class SaveTruckResponse:
    truck: Truck


class CreateTruck:
    def __init__(self, truck_repository: TruckRepository) -> None:
        self._repository = truck_repository

    def execute(self, request: CreateTruckRequest) -> SaveTruckResponse:
        """
        Raises:
            TruckValidationError: If the draft has invalid fields
            ConflictError: If the license number is already registered
        """
        request.draft.validate()
        _ensure_license_number_free(self._repository, request.draft.license_number)

        truck = self._repository.create(request.draft)

        logger.info(
            "Truck created",
            extra={"truck_id": truck.id, "license_number": truck.license_number},
        )
        return SaveTruckResponse(truck=truck)


class UpdateTruck:
    def __init__(self, truck_repository: TruckRepository) -> None:
        self._repository = truck_repository

    def execute(self, request: UpdateTruckRequest) -> SaveTruckResponse:
        """
        Raises:
            ValidationError: If truck_id is not a UUID or the draft is invalid
            NotFoundError: If no truck has the given ID
            ConflictError: If another truck already uses the license number
        """
        validate_truck_id(request.truck_id)
        request.draft.validate()

        if self._repository.get_by_id(request.truck_id) is None:
            raise NotFoundError(resource="Truck", identifier=request.truck_id)

        _ensure_license_number_free(
            self._repository, request.draft.license_number, truck_id=request.truck_id
        )

        truck = self._repository.update(request.truck_id, request.draft)
        if truck is None:
            raise NotFoundError(resource="Truck", identifier=request.truck_id)

        logger.info(
            "Truck updated",
            extra={"truck_id": truck.id, "license_number": truck.license_number},
        )
        return SaveTruckResponse(truck=truck)
