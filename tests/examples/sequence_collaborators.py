"""Define simple stand-ins for the kinematic model, motion planner, and blender of a robot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from motion_sequencing.kinematics import Configuration, KinematicModel, Point3D
from motion_sequencing.motion_planning import (
    MotionPlanner,
    MotionPlanRequest,
    MotionPlanResponse,
    PlanningErrorCode,
    Trajectory,
    TrajectoryPoint,
)
from motion_sequencing.sequencing import BlendRequest, BlendResponse, TrajectoryBlender

XYZ_JOINTS = ("x", "y", "z")
"""Joints of a point-mass group, whose values are the Cartesian position of its tip frame."""


@dataclass(frozen=True)
class GroupInfo:
    """Properties of a joint group in a PointMassModel."""

    has_solver: bool = True
    tip_frame: str = "tool0"


class PointMassModel(KinematicModel):
    """A kinematic model whose groups move a point mass along the prismatic joints x, y, and z."""

    def __init__(self, groups: dict[str, GroupInfo]) -> None:
        """Initialize the model with its named groups."""
        self.groups = groups

    def has_solver(self, group_name: str) -> bool:
        """Check whether the named group has a kinematic solver."""
        return self.groups[group_name].has_solver

    def get_solver_tip_frame(self, group_name: str) -> str:
        """Retrieve the tip frame of the named group's solver."""
        if not self.has_solver(group_name):
            raise ValueError(f"Group '{group_name}' has no solver.")
        return self.groups[group_name].tip_frame

    def get_frame_position(self, group_name: str, positions: Configuration, frame: str) -> Point3D:
        """Compute the position of the group's tip frame (the point mass) at the given positions."""
        assert frame == self.groups[group_name].tip_frame
        return Point3D(*(positions.get(joint, 0.0) for joint in XYZ_JOINTS))


def linear_trajectory(
    group_name: str,
    start: Configuration,
    goal: Configuration,
    duration_s: float = 1.0,
    num_points: int = 3,
) -> Trajectory:
    """Construct a trajectory moving linearly (in joint space) from the start to the goal."""
    points = []
    for i in range(num_points):
        fraction = i / (num_points - 1)
        positions = {j: (1.0 - fraction) * start[j] + fraction * goal[j] for j in goal}
        points.append(TrajectoryPoint(fraction * duration_s, positions))
    return Trajectory(group_name, points)


@dataclass
class ScriptedPlanner(MotionPlanner):
    """A planner that moves linearly to each goal, failing on request for chosen calls."""

    failures: dict[int, PlanningErrorCode | None] = field(default_factory=dict)
    """Map from call indices to the error code returned (None means the planner returns None)."""

    duration_s: float = 1.0
    requests: list[MotionPlanRequest] = field(default_factory=list)

    def generate_plan(self, scene: Any, request: MotionPlanRequest) -> MotionPlanResponse | None:
        """Plan a straight-line joint motion from the request's start state to its goal."""
        call_index = len(self.requests)
        self.requests.append(request)

        goal = request.goal
        if isinstance(goal, Point3D):
            goal = dict(zip(XYZ_JOINTS, goal))

        if request.start_state.is_empty:
            start = {joint: 0.0 for joint in goal}
        else:
            start = request.start_state.configuration

        trajectory = linear_trajectory(request.group_name, start, goal, self.duration_s)

        if call_index in self.failures:
            error_code = self.failures[call_index]
            if error_code is None:
                return None
            return MotionPlanResponse(trajectory, error_code)

        return MotionPlanResponse(trajectory)


@dataclass
class CornerCuttingBlender(TrajectoryBlender):
    """A blender that replaces the corner between two trajectories by a straight shortcut.

    The last point of the first trajectory and the first point of the second are dropped; the blend
    moves directly from the first trajectory's second-to-last point to the second's second point.
    """

    fail: bool = False
    requests: list[BlendRequest] = field(default_factory=list)

    def blend(self, scene: Any, request: BlendRequest) -> BlendResponse | None:
        """Cut the corner between the request's trajectories."""
        self.requests.append(request)
        if self.fail:
            return None

        first, second = request.first_trajectory, request.second_trajectory
        first_part = Trajectory(first.group_name, first.points[:-1])
        second_part = Trajectory(second.group_name, second.points[1:])

        step_s = first.points[-1].time_s - first.points[-2].time_s
        blend_part = Trajectory(
            first.group_name,
            [
                TrajectoryPoint(0.0, first.points[-2].positions),
                TrajectoryPoint(step_s, second.points[1].positions),
            ],
        )
        return BlendResponse(first_part, blend_part, second_part)
