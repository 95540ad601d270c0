#!/usr/bin/env python3
"""
Example: Fill a register and print its views.

Usage:
    python examples/print_register.py

Shows:
1. Arrangements added directly and via create()
2. Place, date and time-window lookups
3. The place/type grouping, rendered as YAML
"""

import logging

from arrangement_register import Arrangement, ArrangementRegister

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Build a small festival programme and print the queries."""
    register = ArrangementRegister()

    register.create(1, 20240612, 1900, "Opening", "Olavshallen", "Trondheim Kommune", "concert")
    register.create(2, 20240612, 1200, "Lunch jazz", "Cafe Ni Muser", "Jazzklubben", "concert")
    register.create(3, 20240611, 1800, "Poetry night", "Olavshallen", "Litteraturhuset", "talk")
    register.create(4, 20240612, 1400, "Matinee", "Olavshallen", "Trondheim Kommune", "concert")
    register.add(
        Arrangement(
            id=5,
            date=20240611,
            time=1000,
            name="Panel",
            place="Olavshallen",
            host="NTNU",
            type="talk",
        )
    )
    logger.info(f"Register holds {len(register)} arrangements")

    print("At Olavshallen:")
    for arrangement in register.get_at_place("Olavshallen"):
        print(f"  {arrangement.date} {arrangement.time:04d}  {arrangement.name}")
    print()

    print("On 20240612:")
    for arrangement in register.get_on_date(20240612):
        print(f"  {arrangement.date} {arrangement.time:04d}  {arrangement.name}")
    print()

    print("Between 20240611 and 20240612:")
    for arrangement in register.get_between_dates(20240612, 20240611):
        print(f"  {arrangement.date} {arrangement.time:04d}  {arrangement.name}")
    print()

    print("Grouped by place and type:")
    print(register.dump_yaml())


if __name__ == "__main__":
    main()
