"""
Dependency injection for FastAPI routes.

Database sessions are per-request; repositories and use cases are built
fresh for each request on top of that session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from fleet_lite.adapters.postgres_truck_repository import PostgresTruckRepository
from fleet_lite.infra.db.session import get_session
from fleet_lite.ports.truck_repository import TruckRepository
from fleet_lite.use_cases.get_truck_by_id import GetTruckById
from fleet_lite.use_cases.list_trucks import ListTrucks
from fleet_lite.use_cases.save_truck import CreateTruck, UpdateTruck


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    get_session() commits when the request finishes, rolls back if it
    raised, and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_truck_repository(db: Session = Depends(get_db)) -> TruckRepository:
    return PostgresTruckRepository(session=db)


def get_list_trucks_use_case(
    repository: TruckRepository = Depends(get_truck_repository),
) -> ListTrucks:
    return ListTrucks(truck_repository=repository)


def get_get_truck_by_id_use_case(
    repository: TruckRepository = Depends(get_truck_repository),
) -> GetTruckById:
    return GetTruckById(truck_repository=repository)


def get_create_truck_use_case(
    repository: TruckRepository = Depends(get_truck_repository),
) -> CreateTruck:
    return CreateTruck(truck_repository=repository)


def get_update_truck_use_case(
    repository: TruckRepository = Depends(get_truck_repository),
) -> UpdateTruck:
    return UpdateTruck(truck_repository=repository)
