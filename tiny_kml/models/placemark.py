"""Data model for a KML Placemark."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tiny_kml.core.constants import DEFAULT_EXTRUDE, DEFAULT_TESSELLATE
from tiny_kml.models.geometry import Geometry, LineString, Point

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tiny_kml.models.location import Location


@dataclass(slots=True)
class Placemark:
    """A named, described feature carrying one geometry.

    Attributes:
        name: Placemark name. Empty when absent from the source.
        description: Placemark description. Empty when absent.
        geometry: The owned ``Point`` or ``LineString``.
    """

    name: str
    description: str
    geometry: Geometry

    @classmethod
    def point(
        cls,
        name: str,
        description: str,
        location: Location,
        *,
        extrude: bool = DEFAULT_EXTRUDE,
        tessellate: bool = DEFAULT_TESSELLATE,
    ) -> Placemark:
        """Build a placemark holding a single point."""
        return cls(name, description, Point(location, extrude, tessellate))

    @classmethod
    def line_string(
        cls,
        name: str,
        description: str,
        locations: Iterable[Location],
        *,
        extrude: bool = DEFAULT_EXTRUDE,
        tessellate: bool = DEFAULT_TESSELLATE,
    ) -> Placemark:
        """Build a placemark holding a polyline through ``locations``."""
        return cls(name, description, LineString(list(locations), extrude, tessellate))
