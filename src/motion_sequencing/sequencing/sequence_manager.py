"""Define the entry point that solves a motion sequence into blended trajectories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from motion_sequencing.io.logging import SequenceDiagnostics
from motion_sequencing.io.pydantic_schemata import load_planning_limits
from motion_sequencing.sequencing.blend_radii import resolve_blend_radii
from motion_sequencing.sequencing.overlap_detection import check_for_overlapping_radii
from motion_sequencing.sequencing.plan_components_builder import PlanComponentsBuilder
from motion_sequencing.sequencing.sequence_planner import SequencePlanner
from motion_sequencing.sequencing.sequence_validation import validate_sequence
from motion_sequencing.sequencing.trajectory_assembly import TrajectoryAssembler

if TYPE_CHECKING:
    from pathlib import Path

    from motion_sequencing.kinematics import KinematicModel
    from motion_sequencing.motion_planning import MotionPlanner, SequenceRequest, Trajectory
    from motion_sequencing.sequencing.blending import BlenderFactory, TrajectoryBlender


class SequenceManager:
    """Solves motion sequences into one continuous trajectory per run of same-group segments.

    A manager owns a plan components builder that is reset and modified during each solve, so one
    manager must not be used by concurrent `solve` calls.
    """

    def __init__(
        self,
        model: KinematicModel,
        blender: TrajectoryBlender,
        *,
        diagnostics: SequenceDiagnostics | None = None,
    ) -> None:
        """Initialize the manager with a kinematic model and a trajectory blender.

        :param model: Kinematic model of the robot, shared read-only across solves
        :param blender: Algorithm used to blend consecutive trajectories of a group
        :param diagnostics: Optional channel for log messages and warnings (defaults to a new one),
            cleared at the start of every solve
        """
        self.model = model
        self.diagnostics = diagnostics or SequenceDiagnostics.for_module(__name__)

        self._planner = SequencePlanner(self.diagnostics)
        builder = PlanComponentsBuilder(model, blender, self.diagnostics)
        self._assembler = TrajectoryAssembler(builder, self.diagnostics)

    @classmethod
    def from_limits_yaml(
        cls,
        model: KinematicModel,
        limits_yaml: Path,
        make_blender: BlenderFactory,
        *,
        diagnostics: SequenceDiagnostics | None = None,
    ) -> SequenceManager:
        """Construct a manager whose blender is configured with limits loaded from YAML.

        :param model: Kinematic model of the robot
        :param limits_yaml: Path to a YAML file specifying joint and Cartesian limits
        :param make_blender: Constructs the trajectory blender from the loaded limits
        :param diagnostics: Optional channel for log messages and warnings
        :return: Constructed SequenceManager instance
        """
        limits = load_planning_limits(limits_yaml)
        return cls(model, make_blender(limits), diagnostics=diagnostics)

    def solve(
        self,
        scene: Any,
        planner: MotionPlanner,
        request: SequenceRequest,
    ) -> list[Trajectory]:
        """Plan every item of the sequence and compose the results into blended trajectories.

        :param scene: Planning scene passed through to the planner and blender
        :param planner: Solves a single motion planning request
        :param request: Sequence of items to be solved
        :return: One trajectory per run of consecutive same-group segments (empty for no items)
        :raises SequenceError: If the sequence is invalid or any of its items cannot be solved
        """
        self.diagnostics.clear()

        if len(request) == 0:
            return []

        validate_sequence(request)

        responses = self._planner.solve(scene, planner, request).unwrap()

        radii = resolve_blend_radii(self.model, request, self.diagnostics)
        check_for_overlapping_radii(self.model, responses, radii)

        return self._assembler.assemble(scene, responses, radii)
