"""Osmosis polygon filter to GeoJSON converter.

Reads an Osmosis ``.poly`` boundary description line by line and produces
a single GeoJSON ``Feature`` whose geometry is a ``Polygon`` or a
``MultiPolygon``.
"""

__version__ = "0.1.0"
