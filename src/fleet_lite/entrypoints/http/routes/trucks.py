from fastapi import APIRouter, Depends, status

from fleet_lite.entrypoints.http.dependencies import (
    get_create_truck_use_case,
    get_get_truck_by_id_use_case,
    get_list_trucks_use_case,
    get_update_truck_use_case,
)
from fleet_lite.entrypoints.http.dtos.truck import TruckResponseDTO, TruckWriteDTO
from fleet_lite.entrypoints.http.error_responses import ErrorResponse
from fleet_lite.entrypoints.http.mappers.truck_mapper import TruckMapper
from fleet_lite.use_cases.get_truck_by_id import GetTruckById, GetTruckByIdRequest
from fleet_lite.use_cases.list_trucks import ListTrucks
from fleet_lite.use_cases.save_truck import (
    CreateTruck,
    CreateTruckRequest,
    UpdateTruck,
    UpdateTruckRequest,
)


router = APIRouter(tags=["Trucks"])


@router.get(
    "/trucks",
    response_model=list[TruckResponseDTO],
    summary="List all trucks",
    description="""
    Return the full truck set.

    No filtering or paging happens on the server: the listing client fetches
    every truck once and filters by name, gender and skin color locally.
    """,
)
def list_trucks(
    use_case: ListTrucks = Depends(get_list_trucks_use_case),
) -> list[TruckResponseDTO]:
    result = use_case.execute()
    return TruckMapper.to_list_response(result.trucks)


@router.get(
    "/trucks/{truck_id}",
    response_model=TruckResponseDTO,
    summary="Get a truck by ID",
    responses={
        404: {"model": ErrorResponse, "description": "Truck not found"},
        422: {"model": ErrorResponse, "description": "Malformed truck ID"},
    },
)
def get_truck(
    truck_id: str,
    use_case: GetTruckById = Depends(get_get_truck_by_id_use_case),
) -> TruckResponseDTO:
    result = use_case.execute(GetTruckByIdRequest(truck_id=truck_id))
    return TruckMapper.to_truck_response(result.truck)


@router.post(
    "/trucks",
    response_model=TruckResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a truck",
    responses={
        409: {"model": ErrorResponse, "description": "License number already registered"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def create_truck(
    body: TruckWriteDTO,
    use_case: CreateTruck = Depends(get_create_truck_use_case),
) -> TruckResponseDTO:
    result = use_case.execute(CreateTruckRequest(draft=TruckMapper.to_domain_draft(body)))
    return TruckMapper.to_truck_response(result.truck)


@router.put(
    "/trucks/{truck_id}",
    response_model=TruckResponseDTO,
    summary="Update a truck",
    responses={
        404: {"model": ErrorResponse, "description": "Truck not found"},
        409: {"model": ErrorResponse, "description": "License number already registered"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def update_truck(
    truck_id: str,
    body: TruckWriteDTO,
    use_case: UpdateTruck = Depends(get_update_truck_use_case),
) -> TruckResponseDTO:
    request = UpdateTruckRequest(truck_id=truck_id, draft=TruckMapper.to_domain_draft(body))
    result = use_case.execute(request)
    return TruckMapper.to_truck_response(result.truck)
