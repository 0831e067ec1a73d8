"""Tests for Location formatting and coordinate text parsing.

Covers:
- Fixed eight-digit, locale-independent formatting
- Multi-token parsing with mixed separators
- Altitude defaulting and extra fields
- Malformed token and non-numeric field rejection
"""

from __future__ import annotations

import pytest

from tiny_kml.core.exceptions import KmlParseError
from tiny_kml.models.location import (
    Location,
    MalformedCoordinatesError,
    NumberFormatError,
)


class TestLocationFormat:
    """Location.format() renders fixed-point text."""

    def test_format_example(self) -> None:
        assert Location(1.5, -2.25, 0).format() == "1.50000000,-2.25000000,0.00000000"

    def test_str_matches_format(self) -> None:
        loc = Location(10.0, 20.0, 30.0)
        assert str(loc) == loc.format()

    def test_large_magnitude_has_no_exponent(self) -> None:
        text = Location(1e10, 1e-10, 123456789.123456789).format()
        assert "e" not in text.lower()
        assert text == "10000000000.00000000,0.00000000,123456789.12345679"

    def test_rounds_to_eight_digits(self) -> None:
        assert Location(0.123456789, 0, 0).format().startswith("0.12345679,")

    def test_default_altitude_is_zero(self) -> None:
        assert Location(3.0, 4.0).altitude == 0.0

    def test_immutable(self) -> None:
        loc = Location(1.0, 2.0)
        with pytest.raises(AttributeError):
            loc.longitude = 5.0  # type: ignore[misc]


class TestParseMany:
    """Location.parse_many() splits and converts coordinate text."""

    def test_multi_token(self) -> None:
        assert Location.parse_many("1,2 3,4,5") == [
            Location(1, 2, 0),
            Location(3, 4, 5),
        ]

    def test_mixed_separators_collapse(self) -> None:
        text = "\n\t 1,2,3 \r\n\r\n4,5,6\t\t7,8 \n"
        assert Location.parse_many(text) == [
            Location(1, 2, 3),
            Location(4, 5, 6),
            Location(7, 8, 0),
        ]

    def test_empty_text_gives_no_locations(self) -> None:
        assert Location.parse_many("") == []
        assert Location.parse_many(" \n\t ") == []

    def test_lone_carriage_return_separates(self) -> None:
        assert len(Location.parse_many("1,2\r3,4")) == 2

    def test_negative_and_exponent_values(self) -> None:
        (loc,) = Location.parse_many("-122.0841,3.7e1,-5")
        assert loc == Location(-122.0841, 37.0, -5.0)

    def test_fields_beyond_altitude_ignored(self) -> None:
        assert Location.parse_many("1,2,3,4") == [Location(1, 2, 3)]

    def test_empty_fields_skipped(self) -> None:
        assert Location.parse_many("1,,2") == [Location(1, 2, 0)]

    def test_order_preserved(self) -> None:
        locations = Location.parse_many("5,0 4,0 3,0 2,0 1,0")
        assert [loc.longitude for loc in locations] == [5, 4, 3, 2, 1]


class TestParseManyErrors:
    """Malformed coordinate text raises typed errors carrying the token."""

    def test_single_field_rejected(self) -> None:
        with pytest.raises(MalformedCoordinatesError) as exc_info:
            Location.parse_many("1")
        assert exc_info.value.token == "1"
        assert exc_info.value.code == "KML_MALFORMED_COORDINATES"

    def test_bad_token_among_good_ones(self) -> None:
        with pytest.raises(MalformedCoordinatesError, match="7"):
            Location.parse_many("1,2 7 3,4")

    def test_non_numeric_field(self) -> None:
        with pytest.raises(NumberFormatError) as exc_info:
            Location.parse_many("1,2 east,north")
        assert exc_info.value.token == "east,north"

    def test_non_numeric_altitude(self) -> None:
        with pytest.raises(NumberFormatError):
            Location.parse_many("1,2,high")

    @pytest.mark.parametrize(
        "token",
        ["1_0,2", "1,2_000", "\u0661,2", "1,\xa02", "1\f,2", "1,2\v", "0x1A,2", "1.2.3,4"],
    )
    def test_non_decimal_field_rejected(self, token: str) -> None:
        with pytest.raises(NumberFormatError) as exc_info:
            Location.parse_many(token)
        assert exc_info.value.token == token

    def test_special_values_accepted(self) -> None:
        (loc,) = Location.parse_many("+.5,-5.,NaN")
        assert loc.longitude == 0.5
        assert loc.latitude == -5.0
        assert loc.altitude != loc.altitude

    def test_errors_are_parse_errors(self) -> None:
        assert issubclass(MalformedCoordinatesError, KmlParseError)
        assert issubclass(NumberFormatError, KmlParseError)
