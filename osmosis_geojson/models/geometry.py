"""GeoJSON geometry variants produced by the polygon filter parser.

A parsed boundary is either a ``Polygon`` (one outer ring plus optional
holes) or a ``MultiPolygon`` (several such ring groups). Both expose the
``__geo_interface__`` protocol so they can be handed to shapely directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from osmosis_geojson.core.constants import GEOJSON_MULTIPOLYGON, GEOJSON_POLYGON

Position = tuple[float, float]
Ring = list[Position]


@dataclass(frozen=True, slots=True)
class Polygon:
    """A single polygon.

    Attributes:
        rings: Ring 0 is the outer boundary, later rings are holes.
    """

    rings: list[Ring] = field(default_factory=list)

    type = GEOJSON_POLYGON

    @property
    def coordinates(self) -> list[list[list[float]]]:
        return [_ring_to_lists(ring) for ring in self.rings]

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "coordinates": self.coordinates}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Polygon:
        coords = data.get("coordinates", [])
        if not isinstance(coords, list):
            msg = f"Polygon coordinates must be a list, got {type(coords).__name__}"
            raise TypeError(msg)
        return cls(rings=[_lists_to_ring(ring) for ring in coords])


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """Several polygons, each a list of rings."""

    polygons: list[list[Ring]] = field(default_factory=list)

    type = GEOJSON_MULTIPOLYGON

    @property
    def coordinates(self) -> list[list[list[list[float]]]]:
        return [[_ring_to_lists(ring) for ring in rings] for rings in self.polygons]

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "coordinates": self.coordinates}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MultiPolygon:
        coords = data.get("coordinates", [])
        if not isinstance(coords, list):
            msg = f"MultiPolygon coordinates must be a list, got {type(coords).__name__}"
            raise TypeError(msg)
        return cls(polygons=[[_lists_to_ring(ring) for ring in rings] for rings in coords])


Geometry = Polygon | MultiPolygon


def geometry_from_dict(data: dict[str, Any]) -> Geometry:
    """Build a geometry variant from a GeoJSON geometry mapping.

    Raises:
        TypeError: If the ``type`` tag is not Polygon or MultiPolygon.
    """
    geom_type = data.get("type")
    if geom_type == GEOJSON_POLYGON:
        return Polygon.from_dict(data)
    if geom_type == GEOJSON_MULTIPOLYGON:
        return MultiPolygon.from_dict(data)
    msg = f"Unsupported geometry type: {geom_type!r}"
    raise TypeError(msg)


def _ring_to_lists(ring: Ring) -> list[list[float]]:
    return [[lon, lat] for lon, lat in ring]


def _lists_to_ring(raw: object) -> Ring:
    if not isinstance(raw, list | tuple):
        msg = f"Ring must be a list, got {type(raw).__name__}"
        raise TypeError(msg)
    return [(float(c[0]), float(c[1])) for c in raw]
