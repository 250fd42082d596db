"""Unit tests for Point3D, a class representing 3D positions."""

import numpy as np
import pytest
from hypothesis import given

from motion_sequencing.kinematics import Point3D

from .strategies.sequence_strategies import points


@given(points())
def test_point3d_to_array_and_back(point: Point3D) -> None:
    """Verify that Point3Ds correctly convert to and from NumPy arrays."""
    # Arrange/Act - Given a Point3D, convert into a NumPy array and then back
    point_arr = point.to_array()
    result_point = Point3D.from_array(point_arr)

    # Assert - Expect that the resulting point exactly equals the original
    assert point == result_point


def test_point3d_from_array_rejects_wrong_shape() -> None:
    """Verify that an array without exactly three values cannot become a Point3D."""
    with pytest.raises(ValueError):
        Point3D.from_array(np.zeros(4))


@given(points(), points())
def test_distance_is_symmetric(a: Point3D, b: Point3D) -> None:
    """Verify that the distance between two points does not depend on their order."""
    assert a.distance_to_m(b) == pytest.approx(b.distance_to_m(a))
    assert a.distance_to_m(a) == 0.0


def test_distance_of_known_points() -> None:
    """Verify the distance between two points forming a 3-4-5 right triangle."""
    assert Point3D(0.0, 0.0, 1.0).distance_to_m(Point3D(3.0, 4.0, 1.0)) == pytest.approx(5.0)


def test_point3d_from_sequence() -> None:
    """Verify that a Point3D can be constructed from a list, but only of three values."""
    assert Point3D.from_sequence([1, 2, 3]) == Point3D(1.0, 2.0, 3.0)
    assert tuple(Point3D(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)

    with pytest.raises(ValueError):
        Point3D.from_sequence([1.0, 2.0])
