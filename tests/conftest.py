"""
Pytest configuration and shared fixtures.
"""

import pytest

from arrangement_register import Arrangement, ArrangementRegister


@pytest.fixture
def register() -> ArrangementRegister:
    """An empty register."""
    return ArrangementRegister()


@pytest.fixture
def festival() -> ArrangementRegister:
    """A register with a small festival programme across two venues."""
    register = ArrangementRegister()
    register.create(1, 20240612, 1900, "Opening", "Olavshallen", "Trondheim Kommune", "concert")
    register.create(2, 20240612, 1200, "Lunch jazz", "Cafe Ni Muser", "Jazzklubben", "concert")
    register.create(3, 20240611, 1800, "Poetry night", "Olavshallen", "Litteraturhuset", "talk")
    register.create(4, 20240612, 1400, "Matinee", "Olavshallen", "Trondheim Kommune", "concert")
    register.create(5, 20240615, 2000, "Closing", "Olavshallen", "Trondheim Kommune", "concert")
    register.add(
        Arrangement(
            id=6,
            date=20240611,
            time=1000,
            name="Panel",
            place="Olavshallen",
            host="NTNU",
            type="talk",
        )
    )
    return register
