"""Tests for winding-number point-in-polygon classification."""

import pytest

from identitrace.core.inclusion import (
    Inclusion,
    contains,
    is_left,
    point_in_polygon,
    winding_number,
)

UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


class TestIsLeft:
    """Tests for is_left."""

    def test_sides(self) -> None:
        """Test left, right and collinear points."""
        assert is_left((0, 0), (1, 0), (0.5, 1)) > 0
        assert is_left((0, 0), (1, 0), (0.5, -1)) < 0
        assert is_left((0, 0), (1, 0), (3, 0)) == 0


class TestWindingNumber:
    """Tests for winding_number."""

    def test_orientation_sign(self) -> None:
        """Test that reversing the polygon flips the sign."""
        assert winding_number((0.5, 0.5), UNIT_SQUARE) == 1
        assert winding_number((0.5, 0.5), list(reversed(UNIT_SQUARE))) == -1

    def test_outside(self) -> None:
        """Test a point outside the polygon."""
        assert winding_number((2, 2), UNIT_SQUARE) == 0

    def test_explicitly_closed_polygon(self) -> None:
        """Test that a repeated closing vertex is accepted."""
        closed = UNIT_SQUARE + [UNIT_SQUARE[0]]
        assert winding_number((0.5, 0.5), closed) == 1

    def test_degenerate(self) -> None:
        """Test that fewer than three vertices enclose nothing."""
        assert winding_number((0, 0), [(0, 0), (1, 0)]) == 0

    def test_double_wound(self) -> None:
        """Test a polygon going around the point twice."""
        assert winding_number((0.5, 0.5), UNIT_SQUARE * 2) == 2


class TestPointInPolygon:
    """Tests for point_in_polygon and its boundary convention."""

    def test_inside(self) -> None:
        """Test the centre of the unit square."""
        assert point_in_polygon((0.5, 0.5), UNIT_SQUARE) == Inclusion.INSIDE

    def test_outside(self) -> None:
        """Test a far away point."""
        assert point_in_polygon((2, 2), UNIT_SQUARE) == Inclusion.OUTSIDE

    @pytest.mark.parametrize(
        ("point", "expected"),
        [
            ((0.5, 0), Inclusion.INSIDE),
            ((0, 0.5), Inclusion.INSIDE),
            ((0.5, 1), Inclusion.OUTSIDE),
            ((1, 0.5), Inclusion.OUTSIDE),
        ],
    )
    def test_boundary_convention(self, point: tuple[float, float], expected: Inclusion) -> None:
        """Test that bottom and left edges are inside, top and right edges outside."""
        assert point_in_polygon(point, UNIT_SQUARE) == expected

    def test_boundary_is_reproducible(self) -> None:
        """Test that repeated classification of a boundary point agrees."""
        results = {point_in_polygon((0.5, 0), UNIT_SQUARE) for _ in range(10)}
        assert results == {Inclusion.INSIDE}

    def test_concave_polygon(self) -> None:
        """Test an L-shaped polygon."""
        l_shape = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]
        assert contains(l_shape, (0.5, 1.5))
        assert not contains(l_shape, (1.5, 1.5))
