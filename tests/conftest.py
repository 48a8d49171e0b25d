"""Shared pytest fixtures for the osmosis-geojson test suite."""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample polygon filter fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def single_polygon_poly(data_dir: Path) -> Path:
    """Path to a single unclosed square ring in scientific notation."""
    return data_dir / "01_single_polygon.poly"


@pytest.fixture()
def polygon_with_hole_poly(data_dir: Path) -> Path:
    """Path to a closed outer ring with one ``!`` hole."""
    return data_dir / "02_polygon_with_hole.poly"


@pytest.fixture()
def multipolygon_poly(data_dir: Path) -> Path:
    """Path to three outer ring groups, the first with a hole."""
    return data_dir / "03_multipolygon.poly"


@pytest.fixture()
def crlf_poly(data_dir: Path) -> Path:
    """Path to a polygon file with Windows line endings."""
    return data_dir / "04_crlf_line_endings.poly"


@pytest.fixture()
def trailing_blank_line_poly(data_dir: Path) -> Path:
    """Path to a polygon file with a blank line after the final end marker."""
    return data_dir / "05_trailing_blank_line.poly"


# ---------------------------------------------------------------------------
# Edge-case fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def empty_name_poly(edge_cases_dir: Path) -> Path:
    """Path to a polygon file whose first line is empty."""
    return edge_cases_dir / "11_empty_name.poly"


@pytest.fixture()
def truncated_poly(edge_cases_dir: Path) -> Path:
    """Path to a polygon file that ends inside a hole ring."""
    return edge_cases_dir / "12_truncated.poly"


@pytest.fixture()
def two_vertex_poly(edge_cases_dir: Path) -> Path:
    """Path to a polygon file with a two-vertex ring."""
    return edge_cases_dir / "13_two_vertex_ring.poly"


@pytest.fixture()
def self_intersecting_poly(edge_cases_dir: Path) -> Path:
    """Path to a bow-tie ring that parses but fails shapely validation."""
    return edge_cases_dir / "14_self_intersecting.poly"


@pytest.fixture()
def invalid_coords_poly(edge_cases_dir: Path) -> Path:
    """Path to a ring with longitudes outside WGS 84 bounds."""
    return edge_cases_dir / "15_invalid_coordinates.poly"


# ---------------------------------------------------------------------------
# In-memory line sequences
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_lines() -> list[str]:
    """One unclosed outer ring with an index column."""
    return ["boundary", "1", " 1 0.0 0.0", " 2 1.0 0.0", " 3 1.0 1.0", "END", "END"]


@pytest.fixture()
def square_with_hole_lines() -> list[str]:
    """One outer ring and one hole, both unclosed."""
    return [
        "boundary",
        "1",
        " 1 0 0",
        " 2 1 0",
        " 3 1 1",
        "END",
        "!2",
        " 1 0.2 0.2",
        " 2 0.5 0.2",
        " 3 0.5 0.5",
        "END",
        "END",
    ]
