"""Tiny KML reader and writer.

Reads and writes a minimal subset of KML 2.2: a named document of
placemarks, each holding either a Point or a LineString with extrude and
tessellate flags.
"""

from tiny_kml.core.config import ConfigValidationError, TranscoderConfig
from tiny_kml.core.exceptions import KmlError, KmlIOError, KmlParseError
from tiny_kml.models import (
    Document,
    Geometry,
    LineString,
    Location,
    MalformedCoordinatesError,
    NumberFormatError,
    Placemark,
    Point,
)
from tiny_kml.transcoder import (
    MalformedDocumentError,
    MalformedElementError,
    MalformedGeometryError,
    MalformedXmlError,
    kml_to_bytes,
    parse_kml_bytes,
    read_kml,
    write_kml,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigValidationError",
    "Document",
    "Geometry",
    "KmlError",
    "KmlIOError",
    "KmlParseError",
    "LineString",
    "Location",
    "MalformedCoordinatesError",
    "MalformedDocumentError",
    "MalformedElementError",
    "MalformedGeometryError",
    "MalformedXmlError",
    "NumberFormatError",
    "Placemark",
    "Point",
    "TranscoderConfig",
    "kml_to_bytes",
    "parse_kml_bytes",
    "read_kml",
    "write_kml",
]
