"""Command-line entry point for ``osmosis2geojson``.

Reads an Osmosis polygon filter file and writes the resulting GeoJSON
Feature to stdout or to a file. All conversion logic lives in
``osmosis_geojson.parsers.poly``; this module is the wiring layer between
the shell and the parser.

Exit status is 0 on success and 1 on any conversion error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from osmosis_geojson import __version__
from osmosis_geojson.core.config import ParserConfig
from osmosis_geojson.core.exceptions import ConversionError
from osmosis_geojson.parsers.poly import parse_poly_file, validate_feature

logger = logging.getLogger("osmosis_geojson.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osmosis2geojson",
        description="Convert an Osmosis polygon filter file to a GeoJSON Feature.",
    )
    parser.add_argument("poly_file", help="input .poly file path")
    parser.add_argument("-o", "--output", help="output GeoJSON file path (default: stdout)")
    parser.add_argument(
        "--indent", type=int, default=None, help="indent the JSON output by N spaces"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="check WGS 84 bounds and polygon validity before writing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log parser progress")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    arguments = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if arguments.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ParserConfig.from_env()
        feature = parse_poly_file(arguments.poly_file, config=config)
        if arguments.validate:
            validate_feature(feature)
    except ConversionError as exc:
        logger.error("%s", exc.message)
        logger.debug("Error details: %s", exc.to_error_dict())
        return 1
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    payload = feature.to_json(indent=arguments.indent)
    if arguments.output:
        Path(arguments.output).write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote %s to %s", feature.geometry.type, arguments.output)
    else:
        sys.stdout.write(payload + "\n")
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
