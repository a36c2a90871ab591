"""Facet and text filtering over an in-memory truck list.

All filters use AND semantics and keep the input order. A record that lacks
a filtered field only matches when that dimension is left at its match-all
value.
"""

from __future__ import annotations

from collections.abc import Iterable

from fleet_lite.domain.truck import GenderFacet, Truck, TruckFilters

# Display forms for the enumerated gender values. Title-casing keeps
# "Male" from matching inside "Female".
_GENDER_DISPLAY: dict[str, str] = {
    GenderFacet.MALE.value: "Male",
    GenderFacet.FEMALE.value: "Female",
    GenderFacet.NOT_APPLICABLE.value: "N/a",
}


def normalize_gender(value: str) -> str:
    """Return the display form of a gender value.

    Known values map through the facet table; anything else only gets its
    first character upper-cased.
    """
    known = _GENDER_DISPLAY.get(value.strip().lower())
    if known is not None:
        return known
    return value[:1].upper() + value[1:]


def _matches_text(truck: Truck, text_query: str) -> bool:
    if not text_query:
        return True
    if truck.name is None:
        return False
    return text_query.lower() in truck.name.lower()


def _matches_gender(truck: Truck, gender_facet: GenderFacet) -> bool:
    if gender_facet is GenderFacet.ALL:
        return True
    if truck.gender is None:
        return False
    return normalize_gender(gender_facet.value) in normalize_gender(truck.gender)


def _matches_skin(truck: Truck, skin_facet: str) -> bool:
    if not skin_facet:
        return True
    if truck.skin_color is None:
        return False
    return skin_facet in truck.skin_color


def filter_trucks(
    trucks: Iterable[Truck],
    text_query: str = "",
    gender_facet: GenderFacet | str = GenderFacet.ALL,
    skin_facet: str = "",
) -> list[Truck]:
    """
    Keep the trucks matching every filter.

    Args:
        trucks: Source records, in display order
        text_query: Case-insensitive substring of the name ("" matches all)
        gender_facet: Facet value or its dropdown string ("all" matches all)
        skin_facet: Case-sensitive substring of the skin color ("" matches all)

    Returns:
        Matching trucks in their original relative order

    Raises:
        FilterValidationError: If gender_facet is not a known facet value
    """
    facet = GenderFacet.parse(gender_facet)

    return [
        truck
        for truck in trucks
        if _matches_text(truck, text_query)
        and _matches_gender(truck, facet)
        and _matches_skin(truck, skin_facet)
    ]


def apply_filters(trucks: Iterable[Truck], filters: TruckFilters) -> list[Truck]:
    return filter_trucks(
        trucks,
        text_query=filters.text,
        gender_facet=filters.gender,
        skin_facet=filters.skin,
    )
