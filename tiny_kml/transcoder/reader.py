"""Streaming KML reader.

Consumes an lxml ``iterparse`` start/end event stream in a single forward
pass and builds a ``Document`` as elements go by. Dispatch is on the
lower-cased local element name and is driven by a three-state machine:

- ``DOCUMENT``: ``name`` and ``description`` both set the document name;
  ``Placemark`` opens a placemark.
- ``PLACEMARK``: ``name``/``description`` fill the placemark; ``Point`` or
  ``LineString`` opens its geometry.
- ``GEOMETRY``: ``extrude`` and ``tessallate`` set flags; ``coordinates``
  completes the placemark and returns to ``DOCUMENT``.

Elements are matched at any depth. Once ``coordinates`` is read the
placemark is finished: flags that follow it are not applied, and any
later siblings are seen by the ``DOCUMENT`` state.
"""

from __future__ import annotations

import enum
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from lxml import etree

from tiny_kml.core.config import TranscoderConfig
from tiny_kml.core.constants import (
    DEFAULT_EXTRUDE,
    DEFAULT_TESSELLATE,
    READ_TAG_COORDINATES,
    READ_TAG_DESCRIPTION,
    READ_TAG_EXTRUDE,
    READ_TAG_LINE_STRING,
    READ_TAG_NAME,
    READ_TAG_PLACEMARK,
    READ_TAG_POINT,
    READ_TAG_TESSELLATE,
)
from tiny_kml.core.exceptions import KmlIOError, KmlParseError
from tiny_kml.models.document import Document
from tiny_kml.models.geometry import geometry_from_locations
from tiny_kml.models.location import (
    Location,
    MalformedCoordinatesError,
    NumberFormatError,
)
from tiny_kml.models.placemark import Placemark

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import BinaryIO

    from lxml.etree import _Element

logger = logging.getLogger("tiny_kml.transcoder.reader")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MalformedXmlError(KmlParseError):
    """Raised when the input is not well-formed XML."""

    default_code = "KML_MALFORMED_XML"


class MalformedElementError(KmlParseError):
    """Raised when a text element is empty, nested or unterminated."""

    default_code = "KML_MALFORMED_ELEMENT"


class MalformedGeometryError(KmlParseError):
    """Raised when a Point/LineString has no ``coordinates`` element."""

    default_code = "KML_MALFORMED_GEOMETRY"


class MalformedDocumentError(KmlParseError):
    """Raised when a Placemark has no Point/LineString element."""

    default_code = "KML_MALFORMED_DOCUMENT"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def read_kml(kml_path: Path | str, *, config: TranscoderConfig | None = None) -> Document:
    """Read a KML file into a ``Document``.

    Args:
        kml_path: Filesystem path to the KML file (str or pathlib.Path).
        config: Transcoder settings. Defaults to ``TranscoderConfig()``.

    Returns:
        The parsed document, placemarks in file order.

    Raises:
        KmlIOError: If the file cannot be opened or read.
        KmlParseError: If the content is not a readable KML document
            (see the concrete subclasses in this module).
    """
    kml_path = Path(kml_path)
    logger.info("Reading KML file: %s", kml_path.name)

    try:
        with kml_path.open("rb") as source:
            document = _read(source, config or TranscoderConfig())
    except OSError as exc:
        msg = f"Cannot read KML file {kml_path}: {exc}"
        raise KmlIOError(msg, stage="read") from exc

    logger.info("Read %d placemark(s) from %s", len(document), kml_path.name)
    return document


def parse_kml_bytes(content: bytes, *, config: TranscoderConfig | None = None) -> Document:
    """Parse in-memory KML content into a ``Document``.

    Raises:
        KmlParseError: If the content is not a readable KML document.
    """
    return _read(io.BytesIO(content), config or TranscoderConfig())


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


class _State(enum.Enum):
    DOCUMENT = "document"
    PLACEMARK = "placemark"
    GEOMETRY = "geometry"


def _read(source: BinaryIO, config: TranscoderConfig) -> Document:
    events = etree.iterparse(
        source,
        events=("start", "end"),
        resolve_entities=False,
        no_network=True,
        huge_tree=config.huge_tree,
    )
    return _DocumentReader(events).run()


class _DocumentReader:
    """Single-use reader driving the state machine over one event stream."""

    def __init__(self, events: Iterator[tuple[str, _Element]]) -> None:
        self._events = events

    def run(self) -> Document:
        document = Document()
        state = _State.DOCUMENT

        name = ""
        description = ""
        geometry_tag = ""
        extrude = DEFAULT_EXTRUDE
        tessellate = DEFAULT_TESSELLATE

        while (event := self._next()) is not None:
            action, elem = event
            tag = _local_name(elem).lower()

            if action == "end":
                if state is _State.DOCUMENT and tag == READ_TAG_PLACEMARK:
                    _release(elem)
                continue

            if state is _State.DOCUMENT:
                if tag in (READ_TAG_NAME, READ_TAG_DESCRIPTION):
                    document.name = self._read_text(elem)
                elif tag == READ_TAG_PLACEMARK:
                    name = ""
                    description = ""
                    state = _State.PLACEMARK

            elif state is _State.PLACEMARK:
                if tag == READ_TAG_NAME:
                    name = self._read_text(elem)
                elif tag == READ_TAG_DESCRIPTION:
                    description = self._read_text(elem)
                elif tag in (READ_TAG_POINT, READ_TAG_LINE_STRING):
                    geometry_tag = _local_name(elem)
                    extrude = DEFAULT_EXTRUDE
                    tessellate = DEFAULT_TESSELLATE
                    state = _State.GEOMETRY

            elif tag == READ_TAG_EXTRUDE:
                extrude = self._read_flag(elem)
            elif tag == READ_TAG_TESSELLATE:
                tessellate = self._read_flag(elem)
            elif tag == READ_TAG_COORDINATES:
                locations = self._read_locations(elem)
                geometry = geometry_from_locations(
                    locations, extrude=extrude, tessellate=tessellate
                )
                document.append(Placemark(name, description, geometry))
                logger.debug(
                    "Placemark %d '%s': %s with %d coordinate(s)",
                    len(document) - 1,
                    name,
                    type(geometry).__name__,
                    len(locations),
                )
                state = _State.DOCUMENT

        if state is _State.PLACEMARK:
            msg = f"Placemark '{name}' ends without a Point or LineString element"
            raise MalformedDocumentError(msg, element="Placemark")
        if state is _State.GEOMETRY:
            msg = f"<{geometry_tag}> in Placemark '{name}' ends without a coordinates element"
            raise MalformedGeometryError(msg, element=geometry_tag)

        return document

    # -- token helpers -------------------------------------------------------

    def _next(self) -> tuple[str, _Element] | None:
        try:
            return next(self._events)
        except StopIteration:
            return None
        except etree.XMLSyntaxError as exc:
            msg = f"Not valid XML: {exc}"
            raise MalformedXmlError(msg) from exc

    def _read_text(self, elem: _Element) -> str:
        """Consume tokens up to ``elem``'s end tag and return its text.

        The element must hold at least one text node and no child elements.
        """
        element = _local_name(elem)
        try:
            event = self._next()
        except MalformedXmlError as exc:
            msg = f"Element <{element}> is not terminated"
            raise MalformedElementError(msg, element=element) from exc

        if event is None:
            msg = f"Element <{element}> is not terminated"
            raise MalformedElementError(msg, element=element)

        action, _ = event
        if action == "start":
            msg = f"Element <{element}> must not contain nested elements"
            raise MalformedElementError(msg, element=element)

        text = _last_text(elem)
        if text is None:
            msg = f"Element <{element}> is empty"
            raise MalformedElementError(msg, element=element)
        # Whitespace-only content is not text
        return text if text.strip() else ""

    def _read_flag(self, elem: _Element) -> bool:
        element = _local_name(elem)
        text = self._read_text(elem)
        try:
            return bool(int(text))
        except ValueError as exc:
            msg = f"Element <{element}> must hold an integer, got {text!r}"
            raise NumberFormatError(msg, element=element, token=text) from exc

    def _read_locations(self, elem: _Element) -> list[Location]:
        element = _local_name(elem)
        text = self._read_text(elem)
        try:
            return Location.parse_many(text)
        except (MalformedCoordinatesError, NumberFormatError) as exc:
            exc.element = element
            raise


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _local_name(elem: _Element) -> str:
    return etree.QName(elem).localname


def _last_text(elem: _Element) -> str | None:
    """Return the last text node inside ``elem`` (comments may split it)."""
    text = elem.text
    for child in elem:
        if child.tail is not None:
            text = child.tail
    return text


def _release(elem: _Element) -> None:
    """Drop a finished subtree so the parsed tree never grows."""
    elem.clear(keep_tail=True)
    parent = elem.getparent()
    if parent is None:
        return
    while elem.getprevious() is not None:
        del parent[0]
