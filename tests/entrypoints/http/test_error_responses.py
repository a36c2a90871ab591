"""Tests for REST error response models."""

from fleet_lite.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


class TestErrorDetail:
    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="production_year", message="Must be between 1900 and 2100")

        assert detail.model_dump() == {
            "field": "production_year",
            "message": "Must be between 1900 and 2100",
            "code": None,
        }

    def test_serializes_to_json(self) -> None:
        detail = ErrorDetail(field="license_number", message="Must not be blank", code="BLANK")

        json_str = detail.model_dump_json()

        assert '"field":"license_number"' in json_str
        assert '"code":"BLANK"' in json_str


class TestErrorResponse:
    def test_simple_error_response(self) -> None:
        response = ErrorResponse(detail="Truck not found", code="NOT_FOUND")

        assert response.errors is None
        assert response.model_dump(exclude_none=True) == {
            "detail": "Truck not found",
            "code": "NOT_FOUND",
        }

    def test_validation_response_parses_field_errors(self) -> None:
        response = ErrorResponse.model_validate(
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "license_number", "message": "Must not be blank", "code": "BLANK"},
                    {"field": "truck_type", "message": "Must not be blank"},
                ],
            }
        )

        assert response.errors is not None
        assert [error.field for error in response.errors] == ["license_number", "truck_type"]
        assert response.errors[1].code is None

    def test_schema_carries_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        codes = [example["code"] for example in schema["examples"]]
        assert codes == ["CONFLICT", "VALIDATION_ERROR"]
