"""
Contract test suite for InMemoryTruckRepository.

The in-memory adapter is the reference implementation of TruckRepository:
insertion order, UUID ids on create, in-place updates.
"""

from __future__ import annotations

import uuid

import pytest

from fleet_lite.adapters.in_memory_truck_repository import InMemoryTruckRepository
from fleet_lite.domain.truck import Truck, TruckDraft


@pytest.fixture()
def draft() -> TruckDraft:
    return TruckDraft(
        license_number="D 7788 ABC",
        truck_type="Engkel",
        license_type="Black",
        production_year=2021,
        name="Han Solo",
        gender="male",
        skin_color="fair",
    )


def test_list_all_preserves_insertion_order(trucks: list[Truck]) -> None:
    repo = InMemoryTruckRepository(trucks)

    assert [truck.id for truck in repo.list_all()] == ["1", "2", "3", "4", "5", "6"]


def test_list_all_on_empty_repository() -> None:
    assert InMemoryTruckRepository().list_all() == []


def test_list_all_returns_a_copy(trucks: list[Truck]) -> None:
    repo = InMemoryTruckRepository(trucks)

    repo.list_all().clear()

    assert len(repo.list_all()) == len(trucks)


def test_get_by_id(trucks: list[Truck]) -> None:
    repo = InMemoryTruckRepository(trucks)

    assert repo.get_by_id("3") == trucks[2]
    assert repo.get_by_id("missing") is None


def test_find_by_license_number(trucks: list[Truck]) -> None:
    repo = InMemoryTruckRepository(trucks)

    assert repo.find_by_license_number(trucks[1].license_number) == trucks[1]
    assert repo.find_by_license_number("Z 0000 ZZZ") is None


def test_create_assigns_uuid_and_appends(trucks: list[Truck], draft: TruckDraft) -> None:
    repo = InMemoryTruckRepository(trucks)

    created = repo.create(draft)

    uuid.UUID(created.id)  # raises if not a UUID
    assert created.license_number == "D 7788 ABC"
    assert repo.list_all()[-1] == created
    assert repo.get_by_id(created.id) == created


def test_update_replaces_fields_in_place(trucks: list[Truck], draft: TruckDraft) -> None:
    repo = InMemoryTruckRepository(trucks)

    updated = repo.update("2", draft)

    assert updated is not None
    assert updated.id == "2"
    assert updated.name == "Han Solo"
    assert [truck.id for truck in repo.list_all()] == ["1", "2", "3", "4", "5", "6"]
    assert repo.get_by_id("2") == updated


def test_update_missing_truck_returns_none(draft: TruckDraft) -> None:
    repo = InMemoryTruckRepository()

    assert repo.update("missing", draft) is None
    assert repo.list_all() == []
