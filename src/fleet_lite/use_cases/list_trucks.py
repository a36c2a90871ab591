from __future__ import annotations

from dataclasses import dataclass

from fleet_lite.domain.truck import Truck
from fleet_lite.ports.truck_repository import TruckRepository


@dataclass(frozen=True, slots=True)
class ListTrucksResponse:
    trucks: list[Truck]


class ListTrucks:
    """
    Return the full truck set.

    The listing client filters and pages on its side, so this use case does
    neither: it hands back every stored truck in repository order.
    """

    def __init__(self, truck_repository: TruckRepository) -> None:
        self._repository = truck_repository

    def execute(self) -> ListTrucksResponse:
        return ListTrucksResponse(trucks=self._repository.list_all())
