"""Define checks that consecutive blends of a motion sequence do not overlap in space."""

from __future__ import annotations

from typing import TYPE_CHECKING

from motion_sequencing.sequencing.errors import OverlappingBlendRadiiError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from motion_sequencing.kinematics import KinematicModel
    from motion_sequencing.motion_planning import Trajectory
    from motion_sequencing.motion_planning.motion_plan_request import MotionPlanResponse
    from motion_sequencing.sequencing.blend_radii import BlendRadii


def blend_radii_overlap(
    model: KinematicModel,
    traj_a: Trajectory,
    radius_a: float,
    traj_b: Trajectory,
    radius_b: float,
) -> bool:
    """Evaluate whether the blend spheres around the ends of two trajectories intersect.

    :param model: Kinematic model used to locate the group's tip frame
    :param traj_a: Earlier trajectory, blended out of with `radius_a`
    :param radius_a: Radius (meters) of the blend around the end of `traj_a`
    :param traj_b: Later trajectory, blended out of with `radius_b`
    :param radius_b: Radius (meters) of the blend around the end of `traj_b`
    :return: True if the tip-frame endpoints are within the sum of the radii, else False
    """
    if traj_a.group_name != traj_b.group_name:
        return False  # No blending between trajectories from different groups

    sum_radii = radius_a + radius_b
    if sum_radii == 0.0:
        return False

    group = traj_a.group_name
    tip_frame = model.get_solver_tip_frame(group)
    end_a = model.get_frame_position(group, traj_a.last_point.positions, tip_frame)
    end_b = model.get_frame_position(group, traj_b.last_point.positions, tip_frame)

    return end_a.distance_to_m(end_b) <= sum_radii


def check_for_overlapping_radii(
    model: KinematicModel,
    responses: Sequence[MotionPlanResponse],
    radii: BlendRadii,
) -> None:
    """Verify that no two consecutive blends of the sequence overlap.

    :param model: Kinematic model used to locate each group's tip frame
    :param responses: Planned responses for the items of the sequence, in order
    :param radii: Effective blend radii between consecutive items
    :raises OverlappingBlendRadiiError: If the blends at the ends of two segments overlap
    """
    if len(responses) < 3:
        return

    for i in range(len(responses) - 2):
        traj_a = responses[i].trajectory
        traj_b = responses[i + 1].trajectory
        if blend_radii_overlap(model, traj_a, radii[i], traj_b, radii[i + 1]):
            raise OverlappingBlendRadiiError(i)
