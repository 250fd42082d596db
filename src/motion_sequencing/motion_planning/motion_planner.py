"""Define an interface for planners that solve one motion planning request at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from motion_sequencing.motion_planning.motion_plan_request import (
        MotionPlanRequest,
        MotionPlanResponse,
    )


class MotionPlanner(ABC):
    """An interface for computing a single motion plan within a planning scene."""

    @abstractmethod
    def generate_plan(self, scene: Any, request: MotionPlanRequest) -> MotionPlanResponse | None:
        """Compute a motion plan (i.e., trajectory) for the given planning request.

        :param scene: Planning scene in which to plan (opaque to callers of this interface)
        :param request: Specifies the joint group, its goal, and an optional start state
        :return: Response with a trajectory and error code, or None if the planner failed outright
        """
        ...
