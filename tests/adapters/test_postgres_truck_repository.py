"""
Unit test suite for PostgresTruckRepository.

Uses a mocked SQLAlchemy session to verify:
- Queries are executed and rows are mapped to Truck entities
- UUID ids are exposed as strings
- Malformed ids never reach the database
- Create/update copy draft fields onto rows and flush
- Unique constraint violations surface as ConflictError
"""

from __future__ import annotations

import uuid
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fleet_lite.adapters.postgres_truck_repository import PostgresTruckRepository
from fleet_lite.domain.errors import ConflictError
from fleet_lite.domain.truck import Truck, TruckDraft
from fleet_lite.infra.db.models.truck import TruckRow

TRUCK_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


@pytest.fixture()
def truck_rows() -> list[TruckRow]:
    return [
        TruckRow(
            id=TRUCK_ID,
            license_number="B 1001 XYZ",
            truck_type="Tronton",
            license_type="Yellow",
            production_year=2018,
            name="Luke Skywalker",
            gender="male",
            skin_color="fair",
        ),
        TruckRow(
            id=uuid.UUID("00000000-0000-0000-0000-000000000002"),
            license_number="B 1002 XYZ",
            truck_type="CDD",
            license_type="Black",
            production_year=2020,
        ),
    ]


@pytest.fixture()
def draft() -> TruckDraft:
    return TruckDraft(
        license_number="L 4321 QQ",
        truck_type="Wingbox",
        license_type="Yellow",
        production_year=2022,
        name="Leia Organa",
        gender="female",
        skin_color="light",
    )


def _rows_result(rows: list[TruckRow]) -> Mock:
    result = Mock()
    result.scalars.return_value.all.return_value = rows
    return result


def _one_result(row: TruckRow | None) -> Mock:
    result = Mock()
    result.scalar_one_or_none.return_value = row
    return result


# ==============================================================================
# Reads
# ==============================================================================


def test_list_all_maps_rows_to_domain(mock_session: Mock, truck_rows: list[TruckRow]) -> None:
    mock_session.execute.return_value = _rows_result(truck_rows)
    repo = PostgresTruckRepository(mock_session)

    trucks = repo.list_all()

    assert mock_session.execute.call_count == 1
    assert all(isinstance(truck, Truck) for truck in trucks)
    assert trucks[0] == Truck(
        id=str(TRUCK_ID),
        license_number="B 1001 XYZ",
        truck_type="Tronton",
        license_type="Yellow",
        production_year=2018,
        name="Luke Skywalker",
        gender="male",
        skin_color="fair",
    )
    # Demo fields stay None when the row has none
    assert trucks[1].name is None
    assert trucks[1].gender is None
    assert trucks[1].skin_color is None


def test_list_all_empty_table(mock_session: Mock) -> None:
    mock_session.execute.return_value = _rows_result([])

    assert PostgresTruckRepository(mock_session).list_all() == []


def test_get_by_id_found(mock_session: Mock, truck_rows: list[TruckRow]) -> None:
    mock_session.execute.return_value = _one_result(truck_rows[0])

    truck = PostgresTruckRepository(mock_session).get_by_id(str(TRUCK_ID))

    assert truck is not None
    assert truck.id == str(TRUCK_ID)


def test_get_by_id_not_found(mock_session: Mock) -> None:
    mock_session.execute.return_value = _one_result(None)

    assert PostgresTruckRepository(mock_session).get_by_id(str(TRUCK_ID)) is None


def test_get_by_id_invalid_uuid_skips_query(mock_session: Mock) -> None:
    assert PostgresTruckRepository(mock_session).get_by_id("not-a-uuid") is None
    mock_session.execute.assert_not_called()


def test_find_by_license_number(mock_session: Mock, truck_rows: list[TruckRow]) -> None:
    mock_session.execute.return_value = _one_result(truck_rows[1])

    truck = PostgresTruckRepository(mock_session).find_by_license_number("B 1002 XYZ")

    assert truck is not None
    assert truck.license_number == "B 1002 XYZ"


# ==============================================================================
# Writes
# ==============================================================================


def test_create_adds_row_and_flushes(mock_session: Mock, draft: TruckDraft) -> None:
    added: list[TruckRow] = []
    mock_session.add.side_effect = added.append

    def assign_id() -> None:
        added[0].id = TRUCK_ID

    mock_session.flush.side_effect = assign_id

    truck = PostgresTruckRepository(mock_session).create(draft)

    mock_session.add.assert_called_once()
    mock_session.flush.assert_called_once()
    assert truck == draft.to_truck(str(TRUCK_ID))


def test_update_copies_draft_onto_row(
    mock_session: Mock, truck_rows: list[TruckRow], draft: TruckDraft
) -> None:
    row = truck_rows[0]
    mock_session.execute.return_value = _one_result(row)

    truck = PostgresTruckRepository(mock_session).update(str(TRUCK_ID), draft)

    mock_session.flush.assert_called_once()
    assert row.license_number == "L 4321 QQ"
    assert row.skin_color == "light"
    assert truck == draft.to_truck(str(TRUCK_ID))


def test_update_missing_truck_returns_none(mock_session: Mock, draft: TruckDraft) -> None:
    mock_session.execute.return_value = _one_result(None)

    assert PostgresTruckRepository(mock_session).update(str(TRUCK_ID), draft) is None
    mock_session.flush.assert_not_called()


def _unique_violation() -> IntegrityError:
    return IntegrityError(
        "INSERT INTO trucks ...",
        {},
        Exception('duplicate key value violates unique constraint "uq_trucks_license_number"'),
    )


def test_create_duplicate_license_number_raises_conflict(
    mock_session: Mock, draft: TruckDraft
) -> None:
    mock_session.flush.side_effect = _unique_violation()

    with pytest.raises(ConflictError) as exc_info:
        PostgresTruckRepository(mock_session).create(draft)

    assert exc_info.value.context == {"field": "license_number"}
    assert "L 4321 QQ" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, IntegrityError)


def test_update_duplicate_license_number_raises_conflict(
    mock_session: Mock, truck_rows: list[TruckRow], draft: TruckDraft
) -> None:
    mock_session.execute.return_value = _one_result(truck_rows[0])
    mock_session.flush.side_effect = _unique_violation()

    with pytest.raises(ConflictError):
        PostgresTruckRepository(mock_session).update(str(TRUCK_ID), draft)
