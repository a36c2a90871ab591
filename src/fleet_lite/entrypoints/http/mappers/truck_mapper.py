from __future__ import annotations

from fleet_lite.domain.truck import Truck, TruckDraft
from fleet_lite.entrypoints.http.dtos.truck import TruckResponseDTO, TruckWriteDTO


class TruckMapper:
    """Maps between REST DTOs and domain models for trucks."""

    @staticmethod
    def to_domain_draft(dto: TruckWriteDTO) -> TruckDraft:
        return TruckDraft(
            license_number=dto.license_number,
            truck_type=dto.truck_type,
            license_type=dto.license_type,
            production_year=dto.production_year,
            name=dto.name,
            gender=dto.gender,
            skin_color=dto.skin_color,
        )

    @staticmethod
    def to_truck_response(truck: Truck) -> TruckResponseDTO:
        return TruckResponseDTO(
            id=truck.id,
            license_number=truck.license_number,
            truck_type=truck.truck_type,
            license_type=truck.license_type,
            production_year=truck.production_year,
            name=truck.name,
            gender=truck.gender,
            skin_color=truck.skin_color,
        )

    @staticmethod
    def to_list_response(trucks: list[Truck]) -> list[TruckResponseDTO]:
        return [TruckMapper.to_truck_response(truck) for truck in trucks]
