"""Input format parsers.

- poly: Osmosis polygon filter files
"""
