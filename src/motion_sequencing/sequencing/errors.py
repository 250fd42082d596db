"""Define the errors that terminate the solving of a motion sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from motion_sequencing.motion_planning import PlanningErrorCode


class SequenceError(Exception):
    """Base class of all errors raised while solving a motion sequence."""


class NegativeBlendRadiusError(SequenceError):
    """An error raised when a sequence item requests a negative blend radius."""

    def __init__(self, index: int, blend_radius: float) -> None:
        """Initialize the error with the index of the offending item and its radius."""
        super().__init__(
            f"All blending radii MUST be non negative, but item [{index}] "
            f"has radius {blend_radius}.",
        )
        self.index = index
        self.blend_radius = blend_radius


InvalidRadiusError = NegativeBlendRadiusError


class LastBlendRadiusNonZeroError(SequenceError):
    """An error raised when the last sequence item requests a blend into a nonexistent segment."""

    def __init__(self, blend_radius: float) -> None:
        """Initialize the error with the blend radius of the last item."""
        super().__init__(f"The blend radius of the last item MUST be zero, got {blend_radius}.")
        self.blend_radius = blend_radius


LastSegmentBlendRadiusError = LastBlendRadiusNonZeroError


class StartStateConflictError(SequenceError):
    """An error raised when a group's non-first item specifies an explicit start state."""

    def __init__(self, group_name: str, index: int) -> None:
        """Initialize the error with the violating group and the index of the offending item."""
        super().__init__(
            "Only the first request is allowed to have a start state, but the requests for "
            f"group '{group_name}' violate the rule (see item [{index}]).",
        )
        self.group_name = group_name
        self.index = index


class PlanningFailedError(SequenceError):
    """An error raised when the motion planner cannot solve one item of the sequence."""

    def __init__(self, index: int, error_code: PlanningErrorCode) -> None:
        """Initialize the error with the index of the failing item and the planner's error code."""
        super().__init__(f"Could not solve request [{index}] (error code: {error_code.name}).")
        self.index = index
        self.error_code = error_code


class OverlappingBlendRadiiError(SequenceError):
    """An error raised when the blend spheres of two consecutive blends intersect."""

    def __init__(self, index: int) -> None:
        """Initialize the error with the index of the first command of the offending pair."""
        super().__init__(f"Overlapping blend radii between command [{index}] and [{index + 1}].")
        self.index = index


class BlendingFailedError(SequenceError):
    """An error raised when the trajectory blender cannot blend two trajectories."""

    def __init__(self, group_name: str, blend_radius: float) -> None:
        """Initialize the error with the group being blended and the requested radius."""
        super().__init__(
            f"Failed to blend trajectories of group '{group_name}' (radius {blend_radius}).",
        )
        self.group_name = group_name
        self.blend_radius = blend_radius
