"""Define a planner that solves every item of a motion sequence, chaining their states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from motion_sequencing.io.logging import SequenceDiagnostics
from motion_sequencing.motion_planning import PlanningErrorCode
from motion_sequencing.sequencing.errors import PlanningFailedError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from motion_sequencing.kinematics import RobotState
    from motion_sequencing.motion_planning import (
        MotionPlanner,
        MotionPlanResponse,
        SequenceRequest,
    )


@dataclass(frozen=True)
class SequencePlanningResult:
    """Either the responses to all items of a sequence, or the error that stopped planning."""

    responses: tuple[MotionPlanResponse, ...] = ()
    error: PlanningFailedError | None = None

    @property
    def success(self) -> bool:
        """Check whether every item of the sequence was solved."""
        return self.error is None

    def unwrap(self) -> list[MotionPlanResponse]:
        """Retrieve the responses, raising the carried error if planning failed."""
        if self.error is not None:
            raise self.error
        return list(self.responses)


def previous_end_state(
    responses: Sequence[MotionPlanResponse],
    group_name: str,
) -> RobotState | None:
    """Find the end state of the most recent response planned for the named group.

    :param responses: Responses solved so far, in sequence order
    :param group_name: Name of the group whose previous end state is found
    :return: State at the last waypoint of the group's latest trajectory, or None if there is none
    """
    for response in reversed(responses):
        if response.group_name == group_name:
            return response.trajectory.end_state
    return None


class SequencePlanner:
    """Solves the items of a sequence in order, stopping at the first failure."""

    def __init__(self, diagnostics: SequenceDiagnostics | None = None) -> None:
        """Initialize the sequence planner with an optional diagnostics channel."""
        self._diagnostics = diagnostics or SequenceDiagnostics.for_module(__name__)

    def solve(
        self,
        scene: Any,
        planner: MotionPlanner,
        request: SequenceRequest,
    ) -> SequencePlanningResult:
        """Plan each item of the sequence, starting each where its group's last segment ended.

        :param scene: Planning scene passed through to the motion planner
        :param planner: Solves a single motion planning request
        :param request: Sequence of items to be solved in order
        :return: Result holding every response, or the error of the first item that failed
        """
        responses: list[MotionPlanResponse] = []
        num_items = len(request)

        for index, item in enumerate(request):
            plan_request = item.request
            start_state = previous_end_state(responses, plan_request.group_name)
            if start_state is not None:
                plan_request = plan_request.with_start_state(start_state)

            response = planner.generate_plan(scene, plan_request)
            if response is None:
                self._diagnostics.error("Generating a plan with the motion planner failed.")
                error = PlanningFailedError(index, PlanningErrorCode.FAILURE)
                return SequencePlanningResult(error=error)

            if not response.success:
                code_name = response.error_code.name
                self._diagnostics.error(f"Could not solve request [{index}]: {code_name}")
                return SequencePlanningResult(error=PlanningFailedError(index, response.error_code))

            if not response.trajectory.points:
                self._diagnostics.error(f"Request [{index}] was solved with an empty trajectory.")
                error = PlanningFailedError(index, PlanningErrorCode.INVALID_MOTION_PLAN)
                return SequencePlanningResult(error=error)

            responses.append(response)
            self._diagnostics.debug(f"Solved [{index + 1}/{num_items}]")

        return SequencePlanningResult(responses=tuple(responses))
