from __future__ import annotations

from abc import ABC, abstractmethod

from fleet_lite.domain.truck import Truck, TruckDraft


class TruckRepository(ABC):
    """
    Port for truck data access.

    Implementations store trucks and return them in a stable order
    (insertion order for the in-memory adapter, license number order for SQL).

    Contract (Preconditions):
        - drafts are validated by the caller (UseCase)
        - uniqueness of license numbers is checked by the caller through
          find_by_license_number before create/update
    """

    @abstractmethod
    def list_all(self) -> list[Truck]:
        """Return every stored truck. No filtering or paging is applied."""
        ...

    @abstractmethod
    def get_by_id(self, truck_id: str) -> Truck | None: ...

    @abstractmethod
    def find_by_license_number(self, license_number: str) -> Truck | None: ...

    @abstractmethod
    def create(self, draft: TruckDraft) -> Truck:
        """
        Store a new truck and assign its identifier.

        Args:
            draft: Pre-validated truck fields

        Returns:
            The stored truck including its new id
        """
        ...

    @abstractmethod
    def update(self, truck_id: str, draft: TruckDraft) -> Truck | None:
        """
        Replace the writable fields of an existing truck.

        Returns:
            The updated truck, or None if no truck has that id
        """
        ...
