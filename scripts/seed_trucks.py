#!/usr/bin/env python3
"""
Seed the trucks table with deterministic random data.

Features:
- Deterministic: fixed seed → same fleet every run
- Idempotent: safe to run multiple times (clears before seeding)
- Each truck carries a character (name, gender, skin color) so the
  listing facets have something to filter on

Usage:
    python scripts/seed_trucks.py
"""

from __future__ import annotations

import random
import string
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fleet_lite.infra.db.models.truck import TruckRow
from fleet_lite.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_TRUCKS = 40


# ==============================================================================
# Fleet Data
# ==============================================================================

TRUCK_TYPES = ["Tronton", "Engkel", "CDD", "CDE", "Wingbox", "Trailer"]

# Plate color decides the license category
LICENSE_TYPES = ["Yellow", "Black"]

# Region prefixes of the license plate
PLATE_REGIONS = ["B", "D", "L", "AB", "H", "N"]

# (name, gender, skin color)
CHARACTERS = [
    ("Luke Skywalker", "male", "fair"),
    ("C-3PO", "n/a", "gold"),
    ("R2-D2", "n/a", "white, blue"),
    ("Darth Vader", "male", "white"),
    ("Leia Organa", "female", "light"),
    ("Owen Lars", "male", "light"),
    ("Beru Whitesun lars", "female", "light"),
    ("Biggs Darklighter", "male", "light"),
    ("Obi-Wan Kenobi", "male", "fair"),
    ("Anakin Skywalker", "male", "fair"),
    ("Chewbacca", "male", "unknown"),
    ("Han Solo", "male", "fair"),
    ("Greedo", "male", "green"),
    ("Jabba Desilijic Tiure", "hermaphrodite", "green-tan, brown"),
    ("Wedge Antilles", "male", "fair"),
    ("Yoda", "male", "green"),
    ("Padmé Amidala", "female", "light"),
    ("Mon Mothma", "female", "fair"),
    ("Shmi Skywalker", "female", "fair"),
    ("Ackbar", "male", "brown mottle"),
]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_license_number(used: set[str]) -> str:
    """Random plate such as 'B 4821 KQT', unique within this seed run."""
    while True:
        region = random.choice(PLATE_REGIONS)
        digits = random.randint(1000, 9999)
        suffix = "".join(random.choices(string.ascii_uppercase, k=3))
        plate = f"{region} {digits} {suffix}"
        if plate not in used:
            used.add(plate)
            return plate


def generate_truck(used_plates: set[str]) -> TruckRow:
    name, gender, skin_color = random.choice(CHARACTERS)

    # Year: 2008-2024 (weighted toward newer)
    production_year = random.choices(
        range(2008, 2025),
        weights=[1, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 5, 5, 6, 6, 7],
        k=1,
    )[0]

    return TruckRow(
        license_number=generate_license_number(used_plates),
        truck_type=random.choice(TRUCK_TYPES),
        license_type=random.choices(LICENSE_TYPES, weights=[4, 1], k=1)[0],
        production_year=production_year,
        name=name,
        gender=gender,
        skin_color=skin_color,
    )


def seed_trucks(num_trucks: int = NUM_TRUCKS, seed: int = RANDOM_SEED) -> None:
    random.seed(seed)

    print(f"Seeding database with {num_trucks} trucks (seed={seed})...")

    with get_session() as session:
        deleted_count = session.query(TruckRow).delete()
        print(f"   Deleted {deleted_count} existing trucks")

        used_plates: set[str] = set()
        trucks = [generate_truck(used_plates) for _ in range(num_trucks)]

        session.add_all(trucks)
        session.flush()

        print(f"Seeded {len(trucks)} trucks")

        print("\nSample trucks:")
        for i, truck in enumerate(trucks[:5], 1):
            print(
                f"   {i}. {truck.license_number} {truck.truck_type} "
                f"({truck.license_type}, {truck.production_year}) - {truck.name}"
            )

        if len(trucks) > 5:
            print(f"   ... and {len(trucks) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_trucks()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
