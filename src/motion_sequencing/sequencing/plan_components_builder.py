"""Define a builder that composes the trajectories of a sequence into continuous motions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from motion_sequencing.io.logging import SequenceDiagnostics
from motion_sequencing.sequencing.blending import BlendRequest
from motion_sequencing.sequencing.errors import BlendingFailedError

if TYPE_CHECKING:
    from motion_sequencing.kinematics import KinematicModel
    from motion_sequencing.motion_planning import Trajectory
    from motion_sequencing.sequencing.blending import TrajectoryBlender

ROBOT_STATE_EQUALITY_EPSILON = 1e-8
"""Tolerance (rad or m) under which two waypoints are treated as the same robot state."""


def append_with_strict_time_increase(result: Trajectory, source: Trajectory) -> None:
    """Append the source trajectory onto the result without repeating a shared waypoint.

    If the source starts at the state where the result ends, its first waypoint is dropped.
    Otherwise the entire source is appended, its first waypoint sharing the result's last time.
    """
    if (
        not result.points
        or not source.points
        or not result.last_point.approx_equal(source.first_point, ROBOT_STATE_EQUALITY_EPSILON)
    ):
        result.append_trajectory(source, gap_s=0.0)
        return

    result.append_trajectory(source, gap_s=0.0, skip_first=True)


class PlanComponentsBuilder:
    """Composes appended trajectories into one trajectory per run of same-group segments."""

    def __init__(
        self,
        model: KinematicModel,
        blender: TrajectoryBlender,
        diagnostics: SequenceDiagnostics | None = None,
    ) -> None:
        """Initialize the builder with the kinematic model and blender it uses."""
        self._model = model
        self._blender = blender
        self._diagnostics = diagnostics or SequenceDiagnostics.for_module(__name__)

        self._tail: Trajectory | None = None  # Trajectory being extended by appended segments
        self._finished: list[Trajectory] = []

    def reset(self) -> None:
        """Discard every trajectory appended since construction or the last reset."""
        self._tail = None
        self._finished = []

    def append(self, scene: Any, trajectory: Trajectory, blend_radius: float) -> None:
        """Append a trajectory, blending into it from the previous one if requested.

        :param scene: Planning scene passed through to the blender
        :param trajectory: Next trajectory of the sequence (not modified)
        :param blend_radius: Radius (meters) of the blend into this trajectory (0.0 = no blend)
        :raises BlendingFailedError: If the blender cannot blend into the trajectory
        """
        if self._tail is None:
            self._tail = trajectory.copy()
            return

        if self._tail.group_name != trajectory.group_name:
            self._finished.append(self._tail)
            self._tail = trajectory.copy()
            return

        if blend_radius <= 0.0:
            append_with_strict_time_increase(self._tail, trajectory)
            return

        self._tail = self._blend(scene, self._tail, trajectory, blend_radius)

    def _blend(
        self,
        scene: Any,
        first: Trajectory,
        second: Trajectory,
        blend_radius: float,
    ) -> Trajectory:
        """Replace the corner between two same-group trajectories by a blend."""
        group = first.group_name
        request = BlendRequest(
            first_trajectory=first,
            second_trajectory=second,
            blend_radius=blend_radius,
            group_name=group,
            link_name=self._model.get_solver_tip_frame(group),
        )

        response = self._blender.blend(scene, request)
        if response is None:
            raise BlendingFailedError(group, blend_radius)
        self._diagnostics.debug(f"Blended group '{group}' with radius {blend_radius} m")

        blended = response.first_trajectory.copy()
        append_with_strict_time_increase(blended, response.blend_trajectory)
        append_with_strict_time_increase(blended, response.second_trajectory)
        return blended

    def build(self) -> list[Trajectory]:
        """Close the trajectory being extended and return every composed trajectory."""
        if self._tail is not None:
            self._finished.append(self._tail)
            self._tail = None

        return list(self._finished)
