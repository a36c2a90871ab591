from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fleet_lite.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class TruckValidationError(ValidationError):
    """Raised when a truck draft breaks a field rule."""

    pass


MIN_PRODUCTION_YEAR = 1900
MAX_PRODUCTION_YEAR = 2100


@dataclass(frozen=True, slots=True)
class Truck:
    id: str
    license_number: str
    truck_type: str
    license_type: str
    production_year: int
    # Descriptive fields used by the listing facets; any of them may be missing
    name: str | None = None
    gender: str | None = None
    skin_color: str | None = None


@dataclass(frozen=True, slots=True)
class TruckDraft:
    """Writable fields of a truck, used for both create and update."""

    license_number: str
    truck_type: str
    license_type: str
    production_year: int
    name: str | None = None
    gender: str | None = None
    skin_color: str | None = None

    def validate(self) -> None:
        """
        Validate draft fields.

        Collects every failing field before raising so the caller can show
        them all at once.

        Raises:
            TruckValidationError: If any field is invalid
        """
        errors: list[dict[str, str]] = []

        for field_name in ("license_number", "truck_type", "license_type"):
            if not getattr(self, field_name).strip():
                errors.append(
                    {"field": field_name, "message": "Must not be blank", "code": "BLANK"}
                )

        if not MIN_PRODUCTION_YEAR <= self.production_year <= MAX_PRODUCTION_YEAR:
            errors.append(
                {
                    "field": "production_year",
                    "message": (
                        f"Must be between {MIN_PRODUCTION_YEAR} and {MAX_PRODUCTION_YEAR}"
                    ),
                    "code": "OUT_OF_RANGE",
                }
            )

        if errors:
            raise TruckValidationError(errors=errors)

    def to_truck(self, truck_id: str) -> Truck:
        return Truck(
            id=truck_id,
            license_number=self.license_number,
            truck_type=self.truck_type,
            license_type=self.license_type,
            production_year=self.production_year,
            name=self.name,
            gender=self.gender,
            skin_color=self.skin_color,
        )


class GenderFacet(StrEnum):
    ALL = "all"
    MALE = "male"
    FEMALE = "female"
    NOT_APPLICABLE = "n/a"

    @classmethod
    def parse(cls, value: str | GenderFacet | None) -> GenderFacet:
        """
        Parse a dropdown value into a facet.

        Accepts the facet values case-insensitively, plus "" / None and the
        dropdown's "allGender" entry as aliases for ALL.

        Raises:
            FilterValidationError: If the value is not part of the facet set
        """
        if isinstance(value, GenderFacet):
            return value
        if value is None:
            return cls.ALL

        normalized = value.strip().lower()
        if normalized in ("", "allgender"):
            return cls.ALL
        try:
            return cls(normalized)
        except ValueError:
            raise FilterValidationError(
                f"Unknown gender facet '{value}'",
                errors=[
                    {
                        "field": "gender",
                        "message": "Must be one of: all, male, female, n/a",
                        "code": "INVALID_FACET",
                    }
                ],
            )


@dataclass(frozen=True, slots=True)
class TruckFilters:
    text: str = ""
    gender: GenderFacet = GenderFacet.ALL
    skin: str = ""

    def is_empty(self) -> bool:
        return not self.text and self.gender is GenderFacet.ALL and not self.skin
