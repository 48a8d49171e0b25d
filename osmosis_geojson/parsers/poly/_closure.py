"""Ring closure for polygon filter parsing.

A ring is closed when its first and last positions agree after rounding
each axis to a fixed number of fractional digits. Rings listed without
a repeated closing vertex get a copy of the first one appended.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from osmosis_geojson.core.constants import (
    DEFAULT_CLOSURE_PRECISION_DIGITS,
    MIN_RING_VERTICES_EXCLUSIVE,
)

if TYPE_CHECKING:
    from osmosis_geojson.models.geometry import Position, Ring

logger = logging.getLogger("osmosis_geojson.parsers.poly")


def positions_equal(
    first: Position,
    second: Position,
    precision: int = DEFAULT_CLOSURE_PRECISION_DIGITS,
) -> bool:
    """Compare two positions on their ``precision``-digit decimal renderings.

    Negative zero renders as ``0``, so ``-0.0`` and ``0.0`` compare equal.
    """
    return all(
        f"{a:z.{precision}f}" == f"{b:z.{precision}f}" for a, b in zip(first, second, strict=True)
    )


def close_ring(ring: Ring, precision: int = DEFAULT_CLOSURE_PRECISION_DIGITS) -> bool:
    """Validate ``ring`` and close it in place.

    Returns:
        ``False`` if the ring has too few vertices to be a ring,
        ``True`` otherwise. Closing an already closed ring is a no-op.
    """
    if len(ring) <= MIN_RING_VERTICES_EXCLUSIVE:
        return False

    first = ring[0]
    if not positions_equal(first, ring[-1], precision):
        logger.debug("Auto-closing ring of %d vertices at %s", len(ring), first)
        ring.append((first[0], first[1]))

    return True
