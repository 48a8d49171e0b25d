"""Coordinate line reader for polygon filter parsing.

Coordinate lines carry a longitude and a latitude, optionally preceded by
an index column::

       1.050000E+01   4.750000E+01
     1  10.5  47.5
     1 10.5 47.5

Fields are separated by runs of two or more whitespace characters. Lines
without such a separator are split on single whitespace, and then three
tokens count as a coordinate only when the first is a number (the index
column), so a single-spaced header such as ``area 7 2`` stays a header.
A single-spaced header whose first word is itself a number is still read
as a coordinate.

A line that does not yield two finite numbers is reported as "not a
coordinate pair" so the state machine can treat it as a ring header.
"""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from osmosis_geojson.models.geometry import Position

logger = logging.getLogger("osmosis_geojson.parsers.poly")

_FIELD_SEPARATOR = re.compile(r"\s{2,}")


def read_coordinate_pair(line: str | None) -> Position | None:
    """Parse ``line`` as a ``(lon, lat)`` pair.

    Returns:
        ``(lon, lat)`` on success, ``None`` if the line is not a
        coordinate pair. A numeric parse failure is logged as a warning,
        never raised.
    """
    if not line:
        return None

    tokens = _split_fields(line)
    if tokens is None:
        return None
    lon_token, lat_token = tokens

    try:
        lon = float(lon_token)
        lat = float(lat_token)
    except ValueError:
        logger.warning("Could not parse coordinate pair: %s, %s", lon_token, lat_token)
        return None

    if not (math.isfinite(lon) and math.isfinite(lat)):
        logger.warning("Non-finite coordinate pair: %s, %s", lon_token, lat_token)
        return None

    return (lon, lat)


def _split_fields(line: str) -> tuple[str, str] | None:
    """Return the longitude and latitude tokens of ``line``, if it has them."""
    stripped = line.strip()
    fields = _FIELD_SEPARATOR.split(stripped)
    if len(fields) < 2:
        fields = stripped.split()
        if len(fields) >= 3 and not _is_number(fields[0]):
            return None

    if len(fields) >= 3:
        return fields[1], fields[2]
    if len(fields) == 2:
        return fields[0], fields[1]
    return None


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True
