"""Line classifier state machine for polygon filter parsing.

Each state names the role the next line is expected to play::

    AWAITING_NAME                    first line, the boundary name
    AWAITING_RING_START              ring header, coordinate or END
    AWAITING_COORDINATE_OR_RING_END  coordinate or END closing the ring
    AWAITING_RING_HEADER_OR_EOF      hole header, outer header or final END

``advance()`` consumes one line, mutates the builder and returns the next
state. Fatal conditions raise a ``PolyParseError`` subclass.

The first ring of a feature is always an outer boundary, so only
``AWAITING_RING_HEADER_OR_EOF`` distinguishes hole headers from new
polygons.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NoReturn

from osmosis_geojson.core.exceptions import InvalidRingClosureError, MalformedInputError
from osmosis_geojson.parsers.poly._builder import GeometryBuilder
from osmosis_geojson.parsers.poly._closure import close_ring
from osmosis_geojson.parsers.poly._coordinates import read_coordinate_pair

if TYPE_CHECKING:
    from osmosis_geojson.core.config import ParserConfig

logger = logging.getLogger("osmosis_geojson.parsers.poly")


class ParserState(enum.Enum):
    AWAITING_NAME = "awaiting_name"
    AWAITING_RING_START = "awaiting_ring_start"
    AWAITING_COORDINATE_OR_RING_END = "awaiting_coordinate_or_ring_end"
    AWAITING_RING_HEADER_OR_EOF = "awaiting_ring_header_or_eof"

    @property
    def is_terminal(self) -> bool:
        return self is ParserState.AWAITING_RING_HEADER_OR_EOF


@dataclass(slots=True)
class ParseContext:
    """Mutable state shared by the transitions of one parse.

    Attributes:
        config: Markers and closure precision.
        builder: Ring structure under construction.
        name: Boundary name, set once from the first line.
        line_number: 1-based number of the line being processed.
    """

    config: ParserConfig
    builder: GeometryBuilder = field(default_factory=GeometryBuilder)
    name: str | None = None
    line_number: int = 0


def advance(state: ParserState, line: str | None, context: ParseContext) -> ParserState:
    """Consume ``line`` in ``state`` and return the next state.

    Raises:
        MalformedInputError: If a required line is empty or absent.
        InvalidRingClosureError: If a ring ends with two or fewer vertices.
    """
    if state is ParserState.AWAITING_NAME:
        return _on_name(line, context)
    if state is ParserState.AWAITING_RING_START:
        return _on_ring_start(line, context)
    if state is ParserState.AWAITING_COORDINATE_OR_RING_END:
        return _on_coordinate_or_ring_end(line, context)
    return _on_ring_header_or_eof(line, context)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def _on_name(line: str | None, context: ParseContext) -> ParserState:
    if _is_empty(line):
        _fail_malformed("name line is empty", context)
    context.name = line
    return ParserState.AWAITING_RING_START


def _on_ring_start(line: str | None, context: ParseContext) -> ParserState:
    if _is_end_marker(line, context):
        return ParserState.AWAITING_RING_HEADER_OR_EOF

    position = read_coordinate_pair(line)
    if position is not None:
        context.builder.append_vertex(position)
        return ParserState.AWAITING_COORDINATE_OR_RING_END

    if _is_empty(line):
        _fail_malformed("expected a ring header, coordinate or end marker", context)

    context.builder.open_ring()
    return ParserState.AWAITING_COORDINATE_OR_RING_END


def _on_coordinate_or_ring_end(line: str | None, context: ParseContext) -> ParserState:
    if _is_end_marker(line, context):
        ring = context.builder.current_ring
        if ring is None or not close_ring(ring, context.config.closure_precision_digits):
            vertex_count = 0 if ring is None else len(ring)
            msg = (
                f"Processing terminated at line {context.line_number}: ring has "
                f"{vertex_count} vertices, need at least 3"
            )
            raise InvalidRingClosureError(msg, line_number=context.line_number)
        return ParserState.AWAITING_RING_HEADER_OR_EOF

    position = read_coordinate_pair(line)
    if position is not None:
        context.builder.append_vertex(position)
        return ParserState.AWAITING_COORDINATE_OR_RING_END

    if _is_empty(line):
        _fail_malformed("expected a coordinate or end marker", context)

    # A ring header without the preceding ring's end marker; accepted as-is.
    logger.warning(
        "Ring header %r at line %d without a preceding end marker",
        line,
        context.line_number,
    )
    context.builder.open_ring()
    return ParserState.AWAITING_RING_START


def _on_ring_header_or_eof(line: str | None, context: ParseContext) -> ParserState:
    if _is_end_marker(line, context):
        return ParserState.AWAITING_RING_HEADER_OR_EOF

    # Blank lines between or after closed rings are skipped.
    if _is_empty(line):
        logger.debug("Skipping blank line %d after a closed ring", context.line_number)
        return ParserState.AWAITING_RING_HEADER_OR_EOF

    builder = context.builder
    if line.startswith(context.config.subtract_marker):  # type: ignore[union-attr]
        builder.open_ring()
        logger.debug("Hole ring %r opened at line %d", line, context.line_number)
    else:
        builder.promote_to_multipolygon()
        builder.open_polygon()
        logger.debug("Polygon %r opened at line %d", line, context.line_number)
    return ParserState.AWAITING_RING_START


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_empty(line: str | None) -> bool:
    return line is None or not line.strip()


def _is_end_marker(line: str | None, context: ParseContext) -> bool:
    return line is not None and line.strip() == context.config.end_marker


def _fail_malformed(reason: str, context: ParseContext) -> NoReturn:
    msg = f"Processing terminated at line {context.line_number}: {reason}"
    raise MalformedInputError(msg, line_number=context.line_number)
