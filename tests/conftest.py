from __future__ import annotations

import pytest

from fleet_lite.domain.truck import Truck


def make_truck(truck_id: str, **fields: object) -> Truck:
    """Truck with plausible fleet fields; demo fields come from **fields."""
    defaults: dict[str, object] = {
        "license_number": f"B {1000 + int(truck_id) if truck_id.isdigit() else 1000} XYZ",
        "truck_type": "Tronton",
        "license_type": "Yellow",
        "production_year": 2019,
    }
    defaults.update(fields)
    return Truck(id=truck_id, **defaults)  # type: ignore[arg-type]


@pytest.fixture()
def trucks() -> list[Truck]:
    return [
        make_truck("1", name="Luke Skywalker", gender="male", skin_color="fair"),
        make_truck("2", name="C-3PO", gender="n/a", skin_color="gold"),
        make_truck("3", name="Leia Organa", gender="female", skin_color="light"),
        make_truck("4", name="Darth Vader", gender="male", skin_color="white"),
        make_truck("5", name="Beru Whitesun lars", gender="female", skin_color="light"),
        make_truck(
            "6", name="Jabba Desilijic Tiure", gender="hermaphrodite", skin_color="green-tan, brown"
        ),
    ]
