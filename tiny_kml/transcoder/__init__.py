"""KML transcoder: the mapping between ``Document`` and KML XML.

- **reader**: single-pass, tag-driven state machine over lxml ``iterparse``
- **writer**: fixed-order element tree serialised with lxml
"""

from __future__ import annotations

from tiny_kml.transcoder.reader import (
    MalformedDocumentError,
    MalformedElementError,
    MalformedGeometryError,
    MalformedXmlError,
    parse_kml_bytes,
    read_kml,
)
from tiny_kml.transcoder.writer import kml_to_bytes, write_kml

__all__ = [
    "MalformedDocumentError",
    "MalformedElementError",
    "MalformedGeometryError",
    "MalformedXmlError",
    "kml_to_bytes",
    "parse_kml_bytes",
    "read_kml",
    "write_kml",
]
