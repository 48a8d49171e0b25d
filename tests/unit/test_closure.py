"""Tests for ring closure.

Covers:
- Minimum vertex count (two vertices fail, three succeed)
- Closing vertex appended exactly once, equal to the first
- Idempotence on already closed rings
- Fixed-precision equality of first and last positions
"""

from __future__ import annotations

from osmosis_geojson.parsers.poly import close_ring, positions_equal


class TestCloseRing:
    """close_ring validation and closure."""

    def test_empty_ring_fails(self) -> None:
        assert close_ring([]) is False

    def test_two_vertices_fail(self) -> None:
        ring = [(0.0, 0.0), (1.0, 0.0)]
        assert close_ring(ring) is False
        assert ring == [(0.0, 0.0), (1.0, 0.0)]

    def test_three_vertices_succeed_and_close(self) -> None:
        ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
        assert close_ring(ring) is True
        assert ring == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)]

    def test_closed_ring_is_left_alone(self) -> None:
        ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)]
        assert close_ring(ring) is True
        assert len(ring) == 4

    def test_closing_twice_is_idempotent(self) -> None:
        ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
        close_ring(ring)
        close_ring(ring)
        assert len(ring) == 4
        assert ring[-1] == ring[0]

    def test_three_identical_vertices_count_as_closed(self) -> None:
        ring = [(5.0, 5.0), (6.0, 6.0), (5.0, 5.0)]
        assert close_ring(ring) is True
        assert len(ring) == 3

    def test_difference_below_precision_is_closed(self) -> None:
        ring = [(0.1, 0.2), (1.0, 0.0), (1.0, 1.0), (0.1 + 1e-14, 0.2)]
        assert close_ring(ring) is True
        assert len(ring) == 4

    def test_difference_above_precision_appends(self) -> None:
        ring = [(0.1, 0.2), (1.0, 0.0), (1.0, 1.0), (0.1, 0.2 + 1e-9)]
        assert close_ring(ring) is True
        assert len(ring) == 5
        assert ring[-1] == (0.1, 0.2)

    def test_negative_zero_counts_as_closed(self) -> None:
        ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (-0.0, 0.0)]
        assert close_ring(ring) is True
        assert len(ring) == 4

    def test_custom_precision(self) -> None:
        ring = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.004, 0.0)]
        assert close_ring(ring, precision=2) is True
        assert len(ring) == 4


class TestPositionsEqual:
    """Fixed-precision position comparison."""

    def test_identical(self) -> None:
        assert positions_equal((10.5, 47.5), (10.5, 47.5))

    def test_differs_in_latitude(self) -> None:
        assert not positions_equal((10.5, 47.5), (10.5, 47.6))

    def test_differs_in_longitude(self) -> None:
        assert not positions_equal((10.5, 47.5), (10.4, 47.5))

    def test_float_noise_ignored(self) -> None:
        assert positions_equal((0.1 + 0.2, 0.0), (0.3, 0.0))

    def test_signed_zeros_are_equal(self) -> None:
        assert positions_equal((0.0, -0.0), (-0.0, 0.0))

    def test_tiny_negative_rounds_to_zero(self) -> None:
        assert positions_equal((-1e-14, 0.0), (0.0, 0.0))
