"""PostgreSQL implementation of TruckRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fleet_lite.domain.errors import ConflictError
from fleet_lite.domain.truck import Truck, TruckDraft
from fleet_lite.infra.db.models.truck import TruckRow
from fleet_lite.ports.truck_repository import TruckRepository


class PostgresTruckRepository(TruckRepository):
    """
    PostgreSQL implementation of TruckRepository.

    - Uses SQLAlchemy ORM for database access
    - Lists trucks ordered by license number so the listing is stable
    - Converts TruckRow (infrastructure) to Truck (domain)
    - Flushes writes; the per-request session commits them
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Truck]:
        query = select(TruckRow).order_by(TruckRow.license_number, TruckRow.id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, truck_id: str) -> Truck | None:
        row = self._get_row(truck_id)
        return self._to_domain(row) if row else None

    def find_by_license_number(self, license_number: str) -> Truck | None:
        query = select(TruckRow).where(TruckRow.license_number == license_number)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def create(self, draft: TruckDraft) -> Truck:
        row = TruckRow()
        self._apply_draft(row, draft)
        self._session.add(row)
        self._flush(draft)
        return self._to_domain(row)

    def update(self, truck_id: str, draft: TruckDraft) -> Truck | None:
        row = self._get_row(truck_id)
        if row is None:
            return None
        self._apply_draft(row, draft)
        self._flush(draft)
        return self._to_domain(row)

    def _flush(self, draft: TruckDraft) -> None:
        # The unique constraint also catches a number claimed by a concurrent write
        try:
            self._session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"License number '{draft.license_number}' is already registered",
                field="license_number",
            ) from exc

    def _get_row(self, truck_id: str) -> TruckRow | None:
        try:
            query = select(TruckRow).where(TruckRow.id == UUID(truck_id))
        except ValueError:  # Invalid UUID format
            return None
        return self._session.execute(query).scalar_one_or_none()

    @staticmethod
    def _apply_draft(row: TruckRow, draft: TruckDraft) -> None:
        row.license_number = draft.license_number
        row.truck_type = draft.truck_type
        row.license_type = draft.license_type
        row.production_year = draft.production_year
        row.name = draft.name
        row.gender = draft.gender
        row.skin_color = draft.skin_color

    @staticmethod
    def _to_domain(row: TruckRow) -> Truck:
        return Truck(
            id=str(row.id),
            license_number=row.license_number,
            truck_type=row.truck_type,
            license_type=row.license_type,
            production_year=row.production_year,
            name=row.name,
            gender=row.gender,
            skin_color=row.skin_color,
        )
