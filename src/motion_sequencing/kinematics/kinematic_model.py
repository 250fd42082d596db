"""Define an interface for the kinematic queries needed while sequencing motions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from motion_sequencing.kinematics.configuration import Configuration
    from motion_sequencing.kinematics.point3d import Point3D


class KinematicModel(ABC):
    """An interface to a robot's kinematic model, queried per named joint group."""

    @abstractmethod
    def has_solver(self, group_name: str) -> bool:
        """Check whether the named group has a kinematic (IK-capable) solver.

        Only groups with a solver can resolve a tip frame, so only they can be blended.
        """
        ...

    @abstractmethod
    def get_solver_tip_frame(self, group_name: str) -> str:
        """Retrieve the name of the tip frame of the named group's solver.

        :raises ValueError: If the group has no solver
        """
        ...

    @abstractmethod
    def get_frame_position(self, group_name: str, positions: Configuration, frame: str) -> Point3D:
        """Compute the position of a frame when the group's joints are at the given positions.

        :param group_name: Name of the joint group whose joints are specified
        :param positions: Map from joint names to positions (rad or m)
        :param frame: Name of the frame whose position is computed (e.g., the tip frame)
        :return: Position of the frame w.r.t. the model's root frame
        """
        ...
