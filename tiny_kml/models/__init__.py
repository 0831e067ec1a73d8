"""Data models.

Defines the in-memory KML tree, leaf to root:
- Location: One lon/lat/alt coordinate
- Point, LineString: Placemark geometry variants
- Placemark: Name, description and one geometry
- Document: Name, description and ordered placemarks
"""

from tiny_kml.models.document import Document
from tiny_kml.models.geometry import Geometry, LineString, Point, geometry_from_locations
from tiny_kml.models.location import Location, MalformedCoordinatesError, NumberFormatError
from tiny_kml.models.placemark import Placemark

__all__ = [
    "Document",
    "Geometry",
    "LineString",
    "Location",
    "MalformedCoordinatesError",
    "NumberFormatError",
    "Placemark",
    "Point",
    "geometry_from_locations",
]
