"""Osmosis polygon filter parsing.

Converts a ``.poly`` line sequence into one GeoJSON ``Feature``. The
parsing pipeline is split into focused stages:
- **_coordinates**: coordinate line reader
- **_closure**: ring validation and closure
- **_builder**: growing Polygon / MultiPolygon structure
- **_state_machine**: line classification and transitions
- **_lines**: lazy file-backed line supply
- **_validation**: optional WGS 84 and shapely checks

File layout::

    boundary name
    1
       1.050000E+01   4.750000E+01
       ...
    END
    !2
       ...
    END
    END

Lines are pulled one at a time; any fatal problem aborts the parse with
a ``PolyParseError`` and no partial feature is returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from osmosis_geojson.core.config import ParserConfig
from osmosis_geojson.core.exceptions import (
    InvalidRingClosureError,
    MalformedInputError,
    PolyFileNotFoundError,
    PolyParseError,
)
from osmosis_geojson.models.feature import Feature
from osmosis_geojson.parsers.poly._builder import GeometryBuilder
from osmosis_geojson.parsers.poly._closure import close_ring, positions_equal
from osmosis_geojson.parsers.poly._coordinates import read_coordinate_pair
from osmosis_geojson.parsers.poly._lines import iter_poly_lines
from osmosis_geojson.parsers.poly._state_machine import ParseContext, ParserState, advance
from osmosis_geojson.parsers.poly._validation import (
    validate_coordinates,
    validate_feature,
    validate_shapely_geometry,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("osmosis_geojson.parsers.poly")

__all__ = [
    "GeometryBuilder",
    "InvalidRingClosureError",
    "MalformedInputError",
    "ParseContext",
    "ParserState",
    "PolyFileNotFoundError",
    "PolyParseError",
    "advance",
    "close_ring",
    "iter_poly_lines",
    "parse_poly",
    "parse_poly_file",
    "positions_equal",
    "read_coordinate_pair",
    "validate_coordinates",
    "validate_feature",
    "validate_shapely_geometry",
]


def parse_poly(lines: Iterable[str | None], *, config: ParserConfig | None = None) -> Feature:
    """Parse a polygon filter line sequence into a Feature.

    Args:
        lines: Lines without terminators, consumed once and in order.
        config: Markers and closure precision (defaults to the Osmosis format).

    Returns:
        A Feature whose geometry is a Polygon, or a MultiPolygon when the
        input holds more than one outer ring group.

    Raises:
        MalformedInputError: If a required line is empty, or the input
            ends before the final end marker.
        InvalidRingClosureError: If a ring ends with two or fewer vertices.
    """
    context = ParseContext(config=config or ParserConfig())
    state = ParserState.AWAITING_NAME

    for line_number, line in enumerate(lines, start=1):
        context.line_number = line_number
        state = advance(state, line, context)

    if not state.is_terminal:
        msg = (
            f"Processing terminated after line {context.line_number}: "
            f"unexpected end of input while {state.value.replace('_', ' ')}"
        )
        raise MalformedInputError(msg, line_number=context.line_number)

    geometry = context.builder.build()
    logger.debug(
        "Parsed %s '%s' from %d line(s)",
        geometry.type,
        context.name,
        context.line_number,
    )
    return Feature(name=context.name or "", geometry=geometry)


def parse_poly_file(poly_path: Path | str, *, config: ParserConfig | None = None) -> Feature:
    """Parse an Osmosis polygon filter file.

    Raises:
        PolyFileNotFoundError: If ``poly_path`` does not exist.
        PolyParseError: If the file cannot be read or is malformed.
    """
    poly_path = Path(poly_path)
    if not poly_path.is_file():
        msg = f"File not found: {poly_path}"
        raise PolyFileNotFoundError(msg)

    logger.info("Parsing polygon file: %s", poly_path.name)
    feature = parse_poly(iter_poly_lines(poly_path), config=config)
    logger.info(
        "Parsed %s with %d polygon(s) from %s",
        feature.geometry.type,
        feature.polygon_count,
        poly_path.name,
    )
    return feature
