"""KML writer.

Walks a ``Document`` depth-first and emits the fixed element layout::

    <kml xmlns="http://www.opengis.net/kml/2.2">
      <Document>
        name, description               (only when non-empty)
        <Placemark>                     (document order)
          name, description             (only when non-empty)
          <Point> or <LineString>
            extrude, tessellate, coordinates

Nothing else is ever written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from lxml import etree
from lxml.builder import ElementMaker

from tiny_kml.core.config import TranscoderConfig
from tiny_kml.core.constants import (
    KML_NAMESPACE,
    TAG_COORDINATES,
    TAG_DESCRIPTION,
    TAG_DOCUMENT,
    TAG_EXTRUDE,
    TAG_KML,
    TAG_LINE_STRING,
    TAG_NAME,
    TAG_PLACEMARK,
    TAG_POINT,
    TAG_TESSELLATE,
)
from tiny_kml.core.exceptions import KmlIOError
from tiny_kml.models.geometry import LineString, Point

if TYPE_CHECKING:
    from lxml.etree import _Element

    from tiny_kml.models.document import Document
    from tiny_kml.models.geometry import Geometry
    from tiny_kml.models.placemark import Placemark

logger = logging.getLogger("tiny_kml.transcoder.writer")

E = ElementMaker(namespace=KML_NAMESPACE, nsmap={None: KML_NAMESPACE})


def write_kml(
    document: Document,
    kml_path: Path | str,
    *,
    config: TranscoderConfig | None = None,
) -> None:
    """Write ``document`` to ``kml_path``, replacing any existing file.

    The file is not written atomically: on failure it may be left
    partially written.

    Raises:
        KmlIOError: If the file cannot be opened or written.
    """
    kml_path = Path(kml_path)
    content = kml_to_bytes(document, config=config)

    logger.info("Writing %d placemark(s) to %s", len(document), kml_path.name)
    try:
        with kml_path.open("wb") as sink:
            sink.write(content)
    except OSError as exc:
        msg = f"Cannot write KML file {kml_path}: {exc}"
        raise KmlIOError(msg, stage="write") from exc


def kml_to_bytes(document: Document, *, config: TranscoderConfig | None = None) -> bytes:
    """Serialise ``document`` to KML bytes with an XML declaration."""
    config = config or TranscoderConfig()

    doc_elem = E(TAG_DOCUMENT, *_name_and_description(document.name, document.description))
    for placemark in document:
        doc_elem.append(_placemark_element(placemark))

    return etree.tostring(
        E(TAG_KML, doc_elem),
        pretty_print=config.pretty_print,
        xml_declaration=True,
        encoding=config.encoding,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _name_and_description(name: str, description: str) -> list[_Element]:
    children = []
    if name:
        children.append(E(TAG_NAME, name))
    if description:
        children.append(E(TAG_DESCRIPTION, description))
    return children


def _placemark_element(placemark: Placemark) -> _Element:
    return E(
        TAG_PLACEMARK,
        *_name_and_description(placemark.name, placemark.description),
        _geometry_element(placemark.geometry),
    )


def _geometry_element(geometry: Geometry) -> _Element:
    if isinstance(geometry, Point):
        tag = TAG_POINT
    elif isinstance(geometry, LineString):
        tag = TAG_LINE_STRING
    else:
        msg = f"geometry must be a Point or LineString, got {type(geometry).__name__}"
        raise TypeError(msg)

    return E(
        tag,
        E(TAG_EXTRUDE, _flag(geometry.extrude)),
        E(TAG_TESSELLATE, _flag(geometry.tessellate)),
        E(TAG_COORDINATES, geometry.coordinates_text()),
    )


def _flag(value: bool) -> str:
    return "1" if value else "0"
