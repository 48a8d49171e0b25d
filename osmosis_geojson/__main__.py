"""Allow ``python -m osmosis_geojson``."""

from osmosis_geojson.cli import run

run()
