"""REST API error response models.

Every non-2xx response of the truck API uses this shape.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation response."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "production_year",
                "message": "Must be between 1900 and 2100",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Truck with identifier '...' not found", "code": "NOT_FOUND"}

        Validation error:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "license_number", "message": "Must not be blank", "code": "BLANK"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "License number 'B 1234 XYZ' is already registered",
                    "code": "CONFLICT",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "license_number",
                            "message": "Must not be blank",
                            "code": "BLANK",
                        },
                        {
                            "field": "production_year",
                            "message": "Must be between 1900 and 2100",
                            "code": "OUT_OF_RANGE",
                        },
                    ],
                },
            ]
        }
    )
