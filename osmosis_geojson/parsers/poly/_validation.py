"""Optional geometry validation for converted features.

Responsibilities:
- Coordinate bounds checking (WGS 84)
- Shapely topology checks (self-intersection, holes outside shell)

The parser itself never runs these checks; the command-line driver
does when asked to with ``--validate``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from osmosis_geojson.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from osmosis_geojson.core.exceptions import GeometryValidationError
from osmosis_geojson.models.geometry import MultiPolygon

if TYPE_CHECKING:
    from osmosis_geojson.models.feature import Feature
    from osmosis_geojson.models.geometry import Ring

logger = logging.getLogger("osmosis_geojson.parsers.poly")


def validate_feature(feature: Feature) -> None:
    """Validate coordinate bounds and topology of ``feature``.

    Raises:
        GeometryValidationError: If a coordinate is outside WGS 84 bounds,
            the feature has no rings, or shapely reports the geometry as
            invalid.
    """
    rings = list(_iter_rings(feature))
    if not rings:
        msg = f"Feature '{feature.name}' has no rings"
        raise GeometryValidationError(msg)

    for ring in rings:
        validate_coordinates(ring, feature.name)

    validate_shapely_geometry(feature)
    logger.info("Feature '%s' passed geometry validation", feature.name)


def validate_coordinates(coords: Ring, feature_name: str) -> None:
    """Validate that all coordinates are within WGS 84 bounds.

    Raises:
        GeometryValidationError: If any coordinate is out of bounds.
    """
    for lon, lat in coords:
        if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
            msg = (
                f"Longitude {lon} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}] "
                f"in feature '{feature_name}'"
            )
            raise GeometryValidationError(msg)
        if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            msg = (
                f"Latitude {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}] "
                f"in feature '{feature_name}'"
            )
            raise GeometryValidationError(msg)


def validate_shapely_geometry(feature: Feature) -> None:
    """Validate geometry using shapely.

    Raises:
        GeometryValidationError: If shapely cannot build the geometry or
            reports it as invalid.
    """
    from shapely.validation import explain_validity

    try:
        geom = feature.to_shape()
    except Exception as exc:
        msg = f"Cannot create geometry for feature '{feature.name}': {exc}"
        raise GeometryValidationError(msg) from exc

    if not geom.is_valid:
        msg = f"Invalid geometry in feature '{feature.name}': {explain_validity(geom)}"
        raise GeometryValidationError(msg)

    if geom.area == 0:
        msg = f"Zero-area geometry in feature '{feature.name}'"
        raise GeometryValidationError(msg)


def _iter_rings(feature: Feature):
    geometry = feature.geometry
    if isinstance(geometry, MultiPolygon):
        for rings in geometry.polygons:
            yield from rings
    else:
        yield from geometry.rings
