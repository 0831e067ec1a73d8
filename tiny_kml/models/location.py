"""Data model for a single KML coordinate.

A Location is one ``longitude,latitude[,altitude]`` tuple as it appears
inside a KML ``<coordinates>`` element. No range checks are applied;
callers are trusted to supply sensible values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tiny_kml.core.constants import COORDINATE_DECIMALS
from tiny_kml.core.exceptions import KmlParseError

# Tokens are separated by any run of these characters
_TOKEN_SEPARATORS = re.compile(r"[ \t\r\n]+")

# Plain ASCII decimal number: no digit grouping, no surrounding whitespace
_DECIMAL = re.compile(
    r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?(nan|inf(inity)?)",
    re.IGNORECASE,
)


class MalformedCoordinatesError(KmlParseError):
    """Raised when a coordinate token has fewer than two fields."""

    default_stage = "coordinates"
    default_code = "KML_MALFORMED_COORDINATES"


class NumberFormatError(KmlParseError):
    """Raised when a numeric field cannot be parsed."""

    default_code = "KML_NUMBER_FORMAT"


@dataclass(frozen=True, slots=True)
class Location:
    """A single KML coordinate. Immutable, so geometries may hold it by value.

    Attributes:
        longitude: Longitude in decimal degrees.
        latitude: Latitude in decimal degrees.
        altitude: Altitude in metres. Defaults to ``0.0``.
    """

    longitude: float
    latitude: float
    altitude: float = 0.0

    def format(self) -> str:
        """Render as ``lon,lat,alt`` with fixed eight-digit precision."""
        return (
            f"{self.longitude:.{COORDINATE_DECIMALS}f},"
            f"{self.latitude:.{COORDINATE_DECIMALS}f},"
            f"{self.altitude:.{COORDINATE_DECIMALS}f}"
        )

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, token: str) -> Location:
        """Parse one ``lon,lat[,alt]`` token.

        Empty comma-separated fields are skipped and fields beyond the
        third are ignored.

        Raises:
            MalformedCoordinatesError: If fewer than two fields remain.
            NumberFormatError: If a field is not a decimal number.
        """
        fields = [f for f in token.split(",") if f]
        if len(fields) < 2:
            msg = f"Missing parameters in coordinate token {token!r}: expected lon,lat[,alt]"
            raise MalformedCoordinatesError(msg, token=token)

        fields = fields[:3]
        if not all(_DECIMAL.fullmatch(f) for f in fields):
            msg = f"Cannot convert coordinate token {token!r} to numbers"
            raise NumberFormatError(msg, stage="coordinates", token=token)

        return cls(*(float(f) for f in fields))

    @classmethod
    def parse_many(cls, text: str) -> list[Location]:
        """Parse KML coordinate text (``lon,lat,alt lon,lat,alt ...``).

        Tokens are separated by runs of spaces, tabs, carriage returns or
        newlines. The returned list follows token order.

        Raises:
            MalformedCoordinatesError: If a token has fewer than two fields.
            NumberFormatError: If a field is not a decimal number.
        """
        return [cls.parse(token) for token in _TOKEN_SEPARATORS.split(text) if token]
