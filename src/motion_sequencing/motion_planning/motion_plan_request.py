"""Define dataclasses to represent single motion planning requests and their responses."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Union

from motion_sequencing.kinematics import Configuration, Point3D, RobotState

if TYPE_CHECKING:
    from motion_sequencing.motion_planning.trajectories import Trajectory

MotionGoal = Union[Configuration, Point3D]
"""A goal is either a target joint configuration or a target position of the group's tip frame."""


class PlanningErrorCode(Enum):
    """An enumeration of outcomes reported by a single-request motion planner."""

    SUCCESS = 1
    FAILURE = 99999
    PLANNING_FAILED = -1
    INVALID_MOTION_PLAN = -2
    TIMED_OUT = -6
    START_STATE_INVALID = -26
    GOAL_CONSTRAINTS_VIOLATED = -7
    INVALID_GROUP_NAME = -15
    INVALID_GOAL_CONSTRAINTS = -16
    NO_IK_SOLUTION = -31


@dataclass(frozen=True)
class MotionPlanRequest:
    """A request to plan the motion of one joint group to a goal."""

    group_name: str
    goal: MotionGoal

    start_state: RobotState = field(default_factory=RobotState)
    """Explicit start state of the motion (defaults to an empty state, i.e., unspecified)."""

    def with_start_state(self, start_state: RobotState) -> MotionPlanRequest:
        """Return a copy of the request starting from the given state."""
        return replace(self, start_state=start_state)


@dataclass(frozen=True)
class MotionPlanResponse:
    """The result of solving a single motion planning request."""

    trajectory: Trajectory
    error_code: PlanningErrorCode = PlanningErrorCode.SUCCESS
    planning_time_s: float = 0.0

    @property
    def success(self) -> bool:
        """Check whether the planner solved its request."""
        return self.error_code == PlanningErrorCode.SUCCESS

    @property
    def group_name(self) -> str:
        """Retrieve the name of the group whose motion was planned."""
        return self.trajectory.group_name
