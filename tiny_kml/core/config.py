"""Transcoder configuration.

All values have defaults that produce the canonical KML layout. Library
callers pass a ``TranscoderConfig`` explicitly; only the command-line
entry point loads one from environment variables.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is not
    usable, so bad settings surface before a file is touched.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from tiny_kml.core.exceptions import KmlError

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(KmlError):
    """Raised when configuration values are not usable.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid values.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class TranscoderConfig:
    """Immutable transcoder configuration.

    Attributes:
        encoding: Character encoding declared and used by the writer.
        pretty_print: Whether the writer indents nested elements.
        huge_tree: Lift libxml2's safety limits on very deep or very
            large documents when reading.
    """

    encoding: str = "UTF-8"
    pretty_print: bool = True
    huge_tree: bool = False

    @classmethod
    def from_env(cls) -> TranscoderConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If the encoding is empty or unknown,
                or a boolean variable is not a recognised word.
        """
        config = cls(
            encoding=os.getenv("KML_ENCODING", "UTF-8"),
            pretty_print=_env_bool("KML_PRETTY_PRINT", default=True),
            huge_tree=_env_bool("KML_HUGE_TREE", default=False),
        )
        _validate(config)
        return config


def _env_bool(key: str, *, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigValidationError(key, raw, "must be one of 1/0, true/false, yes/no, on/off")


def _validate(config: TranscoderConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    if not config.encoding:
        raise ConfigValidationError("KML_ENCODING", config.encoding, "must not be empty")

    try:
        codecs.lookup(config.encoding)
    except LookupError as exc:
        raise ConfigValidationError(
            "KML_ENCODING",
            config.encoding,
            "must name a known character encoding",
        ) from exc
