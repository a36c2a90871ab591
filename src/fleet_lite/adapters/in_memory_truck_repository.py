from __future__ import annotations

import uuid

from fleet_lite.domain.truck import Truck, TruckDraft
from fleet_lite.ports.truck_repository import TruckRepository


class InMemoryTruckRepository(TruckRepository):
    """
    Canonical contract implementation for tests.

    - Stores trucks in insertion order
    - Updates keep the truck at its original position
    - Assigns UUID4 string identifiers on create
    """

    def __init__(self, trucks: list[Truck] | None = None) -> None:
        self._trucks: dict[str, Truck] = {truck.id: truck for truck in trucks or []}

    def list_all(self) -> list[Truck]:
        return list(self._trucks.values())

    def get_by_id(self, truck_id: str) -> Truck | None:
        return self._trucks.get(truck_id)

    def find_by_license_number(self, license_number: str) -> Truck | None:
        for truck in self._trucks.values():
            if truck.license_number == license_number:
                return truck
        return None

    def create(self, draft: TruckDraft) -> Truck:
        truck = draft.to_truck(str(uuid.uuid4()))
        self._trucks[truck.id] = truck
        return truck

    def update(self, truck_id: str, draft: TruckDraft) -> Truck | None:
        if truck_id not in self._trucks:
            return None
        truck = draft.to_truck(truck_id)
        self._trucks[truck_id] = truck
        return truck
