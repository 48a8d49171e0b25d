"""Data model for a converted boundary feature.

A Feature is the single output of the polygon filter parser: the
boundary name from the first line of the file plus its Polygon or
MultiPolygon geometry.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from osmosis_geojson.core.constants import GEOJSON_FEATURE
from osmosis_geojson.models.geometry import Geometry, MultiPolygon, geometry_from_dict

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True, slots=True)
class Feature:
    """A GeoJSON Feature built from one polygon filter file.

    Attributes:
        name: Boundary name taken from the first line of the file.
        geometry: ``Polygon`` or ``MultiPolygon``.
    """

    name: str
    geometry: Geometry

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a GeoJSON ``Feature`` mapping."""
        return {
            "type": GEOJSON_FEATURE,
            "geometry": self.geometry.to_dict(),
            "properties": {"name": self.name},
        }

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Feature:
        """Deserialise from a GeoJSON ``Feature`` mapping.

        A missing ``properties.name`` becomes ``""``.

        Raises:
            TypeError: If the mapping is not a Feature or the geometry is
                not a Polygon or MultiPolygon.
        """
        if data.get("type") != GEOJSON_FEATURE:
            msg = f"Expected a GeoJSON Feature, got type {data.get('type')!r}"
            raise TypeError(msg)

        geometry_raw = data.get("geometry")
        if not isinstance(geometry_raw, dict):
            msg = f"geometry must be a dict, got {type(geometry_raw).__name__}"
            raise TypeError(msg)

        properties = data.get("properties") or {}
        if not isinstance(properties, dict):
            msg = f"properties must be a dict, got {type(properties).__name__}"
            raise TypeError(msg)

        return cls(
            name=str(properties.get("name", "")),
            geometry=geometry_from_dict(geometry_raw),
        )

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_dict()

    def to_shape(self) -> BaseGeometry:
        """Return the geometry as a shapely object."""
        from shapely.geometry import shape

        return shape(self.geometry.to_dict())

    @property
    def polygon_count(self) -> int:
        """Number of outer-ring groups in the geometry."""
        if isinstance(self.geometry, MultiPolygon):
            return len(self.geometry.polygons)
        return 1 if self.geometry.rings else 0

    @property
    def has_holes(self) -> bool:
        """Whether any polygon carries a hole ring."""
        if isinstance(self.geometry, MultiPolygon):
            return any(len(rings) > 1 for rings in self.geometry.polygons)
        return len(self.geometry.rings) > 1
