"""Shared constants for the Osmosis polygon filter format.

Markers and precision live here so that parser, config and tests agree
on one set of defaults.

References:
    https://wiki.openstreetmap.org/wiki/Osmosis/Polygon_Filter_File_Format
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Format markers
# ---------------------------------------------------------------------------

DEFAULT_END_MARKER: str = "END"
"""Line terminating a ring and, repeated, the whole file."""

DEFAULT_SUBTRACT_MARKER: str = "!"
"""Prefix of a ring header that marks the ring as a hole."""

# ---------------------------------------------------------------------------
# Ring closure
# ---------------------------------------------------------------------------

DEFAULT_CLOSURE_PRECISION_DIGITS: int = 12
"""Fractional digits compared when deciding if a ring is already closed."""

MAX_CLOSURE_PRECISION_DIGITS: int = 20

# Vertex count at or below which a ring cannot be closed
MIN_RING_VERTICES_EXCLUSIVE: int = 2

# ---------------------------------------------------------------------------
# GeoJSON
# ---------------------------------------------------------------------------

GEOJSON_FEATURE = "Feature"
GEOJSON_POLYGON = "Polygon"
GEOJSON_MULTIPOLYGON = "MultiPolygon"

# WGS 84 coordinate bounds
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
