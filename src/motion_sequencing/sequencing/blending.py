"""Define the interface between trajectory composition and a trajectory blending algorithm."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from motion_sequencing.motion_planning import PlanningLimits, Trajectory


@dataclass(frozen=True)
class BlendRequest:
    """A request to blend the end of one trajectory into the start of the next."""

    first_trajectory: Trajectory
    second_trajectory: Trajectory
    blend_radius: float
    group_name: str

    link_name: str
    """Name of the link (the group's tip frame) around which the blend sphere is centered."""


@dataclass(frozen=True)
class BlendResponse:
    """The parts of a blended motion, in time order."""

    first_trajectory: Trajectory
    """Part of the first trajectory before it enters the blend sphere."""

    blend_trajectory: Trajectory
    second_trajectory: Trajectory
    """Part of the second trajectory after it leaves the blend sphere."""


class TrajectoryBlender(ABC):
    """An interface for algorithms that replace the corner between two trajectories by a blend."""

    @abstractmethod
    def blend(self, scene: Any, request: BlendRequest) -> BlendResponse | None:
        """Blend the trajectories of the given request.

        :param scene: Planning scene in which the blend is computed
        :param request: Trajectories to be blended, with the blend radius and tip frame
        :return: Blended parts of the motion, or None if the trajectories cannot be blended
        """
        ...


BlenderFactory = Callable[["PlanningLimits"], TrajectoryBlender]
"""Constructs a trajectory blender respecting the given joint and Cartesian limits."""
