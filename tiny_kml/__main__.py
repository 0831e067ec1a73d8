"""Command-line entry point: ``tiny-kml INPUT OUTPUT``.

Reads INPUT and rewrites it to OUTPUT in canonical form. This module is
only the wiring between the command line and the library; all behavior
lives in ``tiny_kml.transcoder``.
"""

from __future__ import annotations

import argparse
import logging
import sys

from tiny_kml.core.config import TranscoderConfig
from tiny_kml.core.exceptions import KmlError
from tiny_kml.transcoder import read_kml, write_kml

logger = logging.getLogger("tiny_kml.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tiny-kml",
        description="Read a KML file and rewrite it in canonical form",
    )
    parser.add_argument("input", help="KML file to read")
    parser.add_argument("output", help="KML file to write (overwritten)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = TranscoderConfig.from_env()
        document = read_kml(args.input, config=config)
        write_kml(document, args.output, config=config)
    except KmlError as exc:
        logger.error("KML conversion failed | %s", exc.to_error_dict())
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
