"""Placemark geometry variants.

A placemark carries exactly one geometry, which is either a ``Point``
(one coordinate) or a ``LineString`` (an ordered, editable sequence of
coordinates). Both variants share the ``extrude`` and ``tessellate``
rendering flags and render their coordinates the same way.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from dataclasses import dataclass, field

from tiny_kml.core.constants import DEFAULT_EXTRUDE, DEFAULT_TESSELLATE
from tiny_kml.models.location import Location


def _coordinates_text(locations: Iterable[Location]) -> str:
    """Render coordinates as KML ``<coordinates>`` text, one space apart.

    The block starts and ends with a newline.
    """
    return "\n" + " ".join(loc.format() for loc in locations) + "\n"


@dataclass(slots=True)
class Point:
    """A single-coordinate geometry.

    Attributes:
        coordinate: The point location.
        extrude: Connect the point to the ground when rendered.
        tessellate: Follow terrain when rendered.
    """

    coordinate: Location
    extrude: bool = DEFAULT_EXTRUDE
    tessellate: bool = DEFAULT_TESSELLATE

    @classmethod
    def from_lon_lat(
        cls,
        longitude: float,
        latitude: float,
        altitude: float = 0.0,
        *,
        extrude: bool = DEFAULT_EXTRUDE,
        tessellate: bool = DEFAULT_TESSELLATE,
    ) -> Point:
        """Build a point from raw numbers."""
        return cls(Location(longitude, latitude, altitude), extrude, tessellate)

    @property
    def coordinates(self) -> tuple[Location]:
        """Read-only view of the single coordinate."""
        return (self.coordinate,)

    def coordinates_text(self) -> str:
        return _coordinates_text(self.coordinates)


@dataclass(slots=True)
class LineString(MutableSequence[Location]):
    """An ordered polyline geometry.

    Behaves as a mutable sequence of ``Location`` (indexing, ``append``,
    ``insert``, ``del``, ``clear``, ``in``, ``len`` and iteration all act
    on ``coordinates``).

    Attributes:
        coordinates: Polyline vertices in drawing order. May be empty.
        extrude: Connect the line to the ground when rendered.
        tessellate: Follow terrain when rendered.
    """

    coordinates: list[Location] = field(default_factory=list)
    extrude: bool = DEFAULT_EXTRUDE
    tessellate: bool = DEFAULT_TESSELLATE

    def __post_init__(self) -> None:
        # Take ownership: never alias the caller's list
        self.coordinates = list(self.coordinates)

    def __getitem__(self, index: int) -> Location:  # type: ignore[override]
        return self.coordinates[index]

    def __setitem__(self, index: int, value: Location) -> None:  # type: ignore[override]
        self.coordinates[index] = value

    def __delitem__(self, index: int) -> None:  # type: ignore[override]
        del self.coordinates[index]

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.coordinates)

    def insert(self, index: int, value: Location) -> None:
        self.coordinates.insert(index, value)

    def clear(self) -> None:
        self.coordinates.clear()

    def coordinates_text(self) -> str:
        return _coordinates_text(self.coordinates)


Geometry = Point | LineString
"""Any placemark geometry."""


def geometry_from_locations(
    locations: list[Location],
    *,
    extrude: bool = DEFAULT_EXTRUDE,
    tessellate: bool = DEFAULT_TESSELLATE,
) -> Geometry:
    """Pick the geometry variant for a parsed coordinate list.

    Exactly one location gives a ``Point``; any other count (including
    zero) gives a ``LineString``.
    """
    if len(locations) == 1:
        return Point(locations[0], extrude, tessellate)
    return LineString(locations, extrude, tessellate)
