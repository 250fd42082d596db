"""Define the assembly of planned segments into strictly time-increasing trajectories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from motion_sequencing.io.logging import SequenceDiagnostics
from motion_sequencing.sequencing.blend_radii import incoming_blend_radius

if TYPE_CHECKING:
    from collections.abc import Sequence

    from motion_sequencing.motion_planning import MotionPlanResponse, Trajectory
    from motion_sequencing.sequencing.blend_radii import BlendRadii
    from motion_sequencing.sequencing.plan_components_builder import PlanComponentsBuilder


def remove_duplicate_time_points(trajectory: Trajectory, diagnostics: SequenceDiagnostics) -> int:
    """Remove each waypoint whose time equals that of the waypoint before it.

    Controllers require strictly increasing waypoint times, so the first occurrence is kept. The
    same index is checked again after a removal, so a run of equal times collapses to its first
    waypoint.

    :param trajectory: Trajectory modified in place
    :param diagnostics: Channel receiving a warning for each removed waypoint
    :return: Number of waypoints removed
    """
    num_removed = 0
    i = 0
    while i < len(trajectory) - 1:
        time_s = trajectory.time_from_start(i)
        if time_s == trajectory.time_from_start(i + 1):
            diagnostics.warning(f"Removed duplicate point at time={time_s:f}")
            trajectory.remove_point(i + 1)
            num_removed += 1
            continue
        i += 1

    return num_removed


class TrajectoryAssembler:
    """Merges the planned segments of a sequence using a plan components builder."""

    def __init__(
        self,
        builder: PlanComponentsBuilder,
        diagnostics: SequenceDiagnostics | None = None,
    ) -> None:
        """Initialize the assembler with the builder it exclusively uses during assembly."""
        self._builder = builder
        self._diagnostics = diagnostics or SequenceDiagnostics.for_module(__name__)

    def assemble(
        self,
        scene: Any,
        responses: Sequence[MotionPlanResponse],
        radii: BlendRadii,
    ) -> list[Trajectory]:
        """Assemble the responses' trajectories into continuous, strictly time-increasing motions.

        :param scene: Planning scene passed through to the builder
        :param responses: Planned responses for the items of the sequence, in order
        :param radii: Effective blend radii between consecutive items
        :return: One trajectory per run of consecutive same-group segments
        """
        self._builder.reset()
        for i, response in enumerate(responses):
            self._builder.append(scene, response.trajectory, incoming_blend_radius(radii, i))

        trajectories = self._builder.build()
        for trajectory in trajectories:
            remove_duplicate_time_points(trajectory, self._diagnostics)

        return trajectories
