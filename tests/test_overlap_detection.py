"""Unit tests for detecting overlapping blend spheres in a motion sequence."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from motion_sequencing.motion_planning import MotionPlanResponse
from motion_sequencing.sequencing import OverlappingBlendRadiiError, check_for_overlapping_radii
from motion_sequencing.sequencing.overlap_detection import blend_radii_overlap

from .examples.sequence_collaborators import GroupInfo, PointMassModel, linear_trajectory

ORIGIN = {"x": 0.0, "y": 0.0, "z": 0.0}


@pytest.fixture
def model() -> PointMassModel:
    """Construct a point-mass model with two solver-backed groups."""
    return PointMassModel({"arm": GroupInfo(), "left_arm": GroupInfo(tip_frame="left_tool0")})


def response_ending_at(group: str, x: float) -> MotionPlanResponse:
    """Construct a response whose trajectory ends with its tip frame at (x, 0, 0)."""
    return MotionPlanResponse(linear_trajectory(group, ORIGIN, {"x": x, "y": 0.0, "z": 0.0}))


def test_overlapping_radii_of_three_segments(model: PointMassModel) -> None:
    """Verify that blend spheres of radius 5 around endpoints 8 m apart are reported."""
    # Arrange - Given three segments of one group whose first two end 8 m apart
    responses = [response_ending_at("arm", x) for x in (0.0, 8.0, 20.0)]
    radii = (5.0, 5.0)

    # Act/Assert - Expect the pair (0, 1) to be reported, since 8 <= 5 + 5
    with pytest.raises(OverlappingBlendRadiiError) as exc_info:
        check_for_overlapping_radii(model, responses, radii)

    assert exc_info.value.index == 0
    assert "[0] and [1]" in str(exc_info.value)


def test_distance_equal_to_sum_of_radii_overlaps(model: PointMassModel) -> None:
    """Verify that spheres touching at exactly the sum of their radii count as overlapping."""
    traj_a = response_ending_at("arm", 0.0).trajectory
    traj_b = response_ending_at("arm", 1.0).trajectory

    assert blend_radii_overlap(model, traj_a, 0.5, traj_b, 0.5)
    assert not blend_radii_overlap(model, traj_a, 0.5, traj_b, 0.49)


def test_overlap_reports_later_pair(model: PointMassModel) -> None:
    """Verify that the index of the offending pair is reported for later windows."""
    responses = [response_ending_at("arm", x) for x in (0.0, 10.0, 10.5, 30.0)]
    radii = (1.0, 0.3, 0.3)

    with pytest.raises(OverlappingBlendRadiiError) as exc_info:
        check_for_overlapping_radii(model, responses, radii)

    assert exc_info.value.index == 1


def test_zero_radii_never_overlap(model: PointMassModel) -> None:
    """Verify that coincident endpoints are fine when no blending is requested."""
    responses = [response_ending_at("arm", 0.0) for _ in range(3)]

    check_for_overlapping_radii(model, responses, (0.0, 0.0))


def test_fewer_than_three_segments_never_overlap(model: PointMassModel) -> None:
    """Verify that sequences of fewer than three segments are not checked."""
    responses = [response_ending_at("arm", 0.0), response_ending_at("arm", 0.0)]

    check_for_overlapping_radii(model, responses, (5.0,))
    check_for_overlapping_radii(model, [], ())


@given(st.floats(min_value=0.0, max_value=100.0), st.floats(min_value=0.0, max_value=100.0))
def test_cross_group_segments_never_overlap(radius_a: float, radius_b: float) -> None:
    """Verify that adjacent segments of different groups are never checked for overlap."""
    # Arrange - Given coincident endpoints that alternate between two groups
    model = PointMassModel({"arm": GroupInfo(), "left_arm": GroupInfo(tip_frame="left_tool0")})
    responses = [response_ending_at(g, 0.0) for g in ("arm", "left_arm", "arm", "left_arm")]
    radii = (radius_a, radius_b, radius_a)

    # Act/Assert - Expect no error regardless of the radii
    check_for_overlapping_radii(model, responses, radii)
