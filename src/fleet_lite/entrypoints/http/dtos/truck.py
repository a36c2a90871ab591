from pydantic import BaseModel, ConfigDict, Field


class TruckResponseDTO(BaseModel):
    """Truck as served to the listing client (wire field names kept as-is)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    license_number: str = Field(alias="License_number")
    truck_type: str = Field(alias="Truck_type")
    license_type: str = Field(alias="License_type")
    production_year: int = Field(alias="Production_year")
    name: str | None = None
    gender: str | None = None
    skin_color: str | None = Field(default=None, alias="skinColor")


class TruckWriteDTO(BaseModel):
    """Request body for creating or updating a truck."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "License_number": "B 1234 XYZ",
                "Truck_type": "Tronton",
                "License_type": "Yellow",
                "Production_year": 2019,
                "name": "Luke Skywalker",
                "gender": "male",
                "skinColor": "fair",
            }
        },
    )

    license_number: str = Field(
        alias="License_number",
        description="License plate number (unique across the fleet)",
        max_length=20,
    )
    truck_type: str = Field(
        alias="Truck_type",
        description="Body type of the truck",
        examples=["Tronton"],
        max_length=30,
    )
    license_type: str = Field(
        alias="License_type",
        description="Plate color / license category",
        examples=["Yellow"],
        max_length=30,
    )
    production_year: int = Field(
        alias="Production_year",
        description="Year the truck was built",
        examples=[2019],
    )
    name: str | None = Field(default=None, max_length=100)
    gender: str | None = Field(default=None, max_length=20)
    skin_color: str | None = Field(default=None, alias="skinColor", max_length=50)
