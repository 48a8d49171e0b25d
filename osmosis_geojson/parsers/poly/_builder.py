"""Incremental geometry builder for polygon filter parsing.

The builder always holds a list of polygons, each a list of rings. The
public ``Polygon`` / ``MultiPolygon`` variant is only chosen in
``build()``, after the whole file has been read, since a second outer
ring group can appear at any point.
"""

from __future__ import annotations

import logging

from osmosis_geojson.models.geometry import Geometry, MultiPolygon, Polygon, Position, Ring

logger = logging.getLogger("osmosis_geojson.parsers.poly")


class GeometryBuilder:
    """Owns the growing ring structure of one feature.

    Only the last ring of the last polygon is ever appended to.
    """

    def __init__(self) -> None:
        self._polygons: list[list[Ring]] = [[]]
        self._promoted = False

    @property
    def is_multipolygon(self) -> bool:
        return self._promoted

    @property
    def polygons(self) -> list[list[Ring]]:
        return self._polygons

    @property
    def current_polygon(self) -> list[Ring]:
        return self._polygons[-1]

    @property
    def current_ring(self) -> Ring | None:
        """The open ring, or ``None`` before the first ring is opened."""
        polygon = self._polygons[-1]
        return polygon[-1] if polygon else None

    def open_ring(self) -> Ring:
        """Append an empty ring to the current polygon."""
        ring: Ring = []
        self._polygons[-1].append(ring)
        return ring

    def open_polygon(self) -> Ring:
        """Start a new polygon holding one empty ring."""
        ring: Ring = []
        self._polygons.append([ring])
        return ring

    def append_vertex(self, position: Position) -> None:
        """Push ``position`` onto the open ring, opening one if none exists."""
        ring = self.current_ring
        if ring is None:
            ring = self.open_ring()
        ring.append(position)

    def promote_to_multipolygon(self) -> None:
        """Switch the output variant to ``MultiPolygon``.

        The rings collected so far become the first polygon. Calling this
        on an already promoted builder does nothing.
        """
        if self._promoted:
            return
        self._promoted = True
        logger.debug("Promoting Polygon to MultiPolygon (%d ring(s))", len(self._polygons[0]))

    def build(self) -> Geometry:
        """Collapse the collected rings into the public geometry variant."""
        if self._promoted:
            return MultiPolygon(polygons=[list(rings) for rings in self._polygons])
        return Polygon(rings=list(self._polygons[0]))
