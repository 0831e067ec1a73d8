"""Unified exception taxonomy for KML transcoding.

Every domain exception inherits from ``KmlError`` and carries structured
context fields (stage, code, offending element or token) so that callers
can report failures consistently.

Taxonomy categories
-------------------
- ``KmlParseError`` — the input is not a readable KML document.
- ``KmlIOError``    — the underlying file could not be opened, read or written.

Concrete parse errors live next to the code that raises them
(``tiny_kml.models.location`` and ``tiny_kml.transcoder.reader``).

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class KmlError(Exception):
    """Base exception for all tiny_kml errors.

    Attributes:
        message: Human-readable error description.
        stage: Operation where the error occurred
            (e.g. ``"read"``, ``"write"``, ``"coordinates"``).
        code: Machine-readable error code (e.g. ``"KML_MALFORMED_ELEMENT"``).
        element: Name of the offending XML element, if known.
        token: Offending coordinate token or text value, if known.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        element: str = "",
        token: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.element = element
        self.token = token
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, KmlParseError):
            return "parse"
        if isinstance(self, KmlIOError):
            return "io"
        return "usage"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "element": self.element,
            "token": self.token,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class KmlParseError(KmlError):
    """The input could not be interpreted as a KML document."""

    default_stage = "read"
    default_code = "KML_PARSE_FAILED"


class KmlIOError(KmlError):
    """An underlying file open, read or write failed."""

    default_code = "KML_IO_FAILED"
