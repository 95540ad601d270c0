"""
Tests for the Arrangement model.

Tests cover:
- Construction and field access
- Immutability
- Acceptance of out-of-convention dates and times
- Sort key and YAML dict conversion
"""

import pytest
from pydantic import ValidationError

from arrangement_register.models import Arrangement


def make_arrangement(**overrides) -> Arrangement:
    fields = {
        "id": 1,
        "date": 20240612,
        "time": 1900,
        "name": "Opening",
        "place": "Olavshallen",
        "host": "Trondheim Kommune",
        "type": "concert",
    }
    fields.update(overrides)
    return Arrangement(**fields)


class TestArrangement:
    """Tests for Arrangement model."""

    def test_create_arrangement(self) -> None:
        """Create an arrangement and read back every field."""
        arrangement = make_arrangement()
        assert arrangement.id == 1
        assert arrangement.date == 20240612
        assert arrangement.time == 1900
        assert arrangement.name == "Opening"
        assert arrangement.place == "Olavshallen"
        assert arrangement.host == "Trondheim Kommune"
        assert arrangement.type == "concert"

    def test_arrangement_is_frozen(self) -> None:
        """Fields cannot be reassigned after construction."""
        arrangement = make_arrangement()
        with pytest.raises(ValidationError):
            arrangement.place = "Elsewhere"
        assert arrangement.place == "Olavshallen"

    def test_out_of_range_values_accepted(self) -> None:
        """Nonsensical dates and times are stored as given."""
        arrangement = make_arrangement(date=-5, time=9999)
        assert arrangement.date == -5
        assert arrangement.time == 9999

    def test_non_integer_date_rejected(self) -> None:
        """A date that is not an integer is a type error."""
        with pytest.raises(ValidationError):
            make_arrangement(date="tomorrow")

    def test_sort_key(self) -> None:
        """Sort key is (date, time)."""
        assert make_arrangement(date=100, time=800).sort_key() == (100, 800)

    def test_sort_key_orders_by_date_then_time(self) -> None:
        """Date dominates, time breaks ties."""
        early = make_arrangement(id=1, date=100, time=2300)
        later_same_day = make_arrangement(id=2, date=100, time=2330)
        next_day = make_arrangement(id=3, date=101, time=0)
        ordered = sorted([next_day, later_same_day, early], key=Arrangement.sort_key)
        assert [a.id for a in ordered] == [1, 2, 3]

    def test_value_equality(self) -> None:
        """Arrangements with equal fields compare equal."""
        assert make_arrangement() == make_arrangement()
        assert make_arrangement() != make_arrangement(id=2)

    def test_hashable(self) -> None:
        """Frozen arrangements can be used in sets."""
        assert len({make_arrangement(), make_arrangement(), make_arrangement(id=2)}) == 2

    def test_to_yaml_dict(self) -> None:
        """YAML dict carries every field."""
        data = make_arrangement().to_yaml_dict()
        assert data == {
            "id": 1,
            "date": 20240612,
            "time": 1900,
            "name": "Opening",
            "place": "Olavshallen",
            "host": "Trondheim Kommune",
            "type": "concert",
        }
