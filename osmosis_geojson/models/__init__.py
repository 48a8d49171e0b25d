"""Data models.

- Feature: Boundary name plus geometry, serialisable as GeoJSON
- Polygon / MultiPolygon: Geometry variants built by the parser
"""

from osmosis_geojson.models.feature import Feature
from osmosis_geojson.models.geometry import (
    Geometry,
    MultiPolygon,
    Polygon,
    Position,
    Ring,
    geometry_from_dict,
)

__all__ = [
    "Feature",
    "Geometry",
    "MultiPolygon",
    "Polygon",
    "Position",
    "Ring",
    "geometry_from_dict",
]
