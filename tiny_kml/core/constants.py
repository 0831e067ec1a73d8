"""Shared KML constants.

Element names are kept here so the reader and the writer agree on
spelling, including the one place where they deliberately do not.
"""

from __future__ import annotations

# KML 2.2 namespace
KML_NAMESPACE: str = "http://www.opengis.net/kml/2.2"

# Fixed-point digits used when formatting coordinates
COORDINATE_DECIMALS: int = 8

# ---------------------------------------------------------------------------
# Element names as written
# ---------------------------------------------------------------------------

TAG_KML = "kml"
TAG_DOCUMENT = "Document"
TAG_PLACEMARK = "Placemark"
TAG_NAME = "name"
TAG_DESCRIPTION = "description"
TAG_POINT = "Point"
TAG_LINE_STRING = "LineString"
TAG_EXTRUDE = "extrude"
TAG_TESSELLATE = "tessellate"
TAG_COORDINATES = "coordinates"

# ---------------------------------------------------------------------------
# Element names as read (lower-cased local names)
# ---------------------------------------------------------------------------

READ_TAG_NAME = "name"
READ_TAG_DESCRIPTION = "description"
READ_TAG_PLACEMARK = "placemark"
READ_TAG_POINT = "point"
READ_TAG_LINE_STRING = "linestring"
READ_TAG_EXTRUDE = "extrude"
READ_TAG_COORDINATES = "coordinates"

READ_TAG_TESSELLATE = "tessallate"
"""Historical spelling accepted by existing readers.

Files written by ``write_kml`` use ``tessellate``; that spelling is not
recognised on read and the flag keeps its default.
"""

# Flag values used when a geometry does not specify them
DEFAULT_EXTRUDE: bool = False
DEFAULT_TESSELLATE: bool = True
