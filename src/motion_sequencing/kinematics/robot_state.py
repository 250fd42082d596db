"""Define a class representing a (possibly empty) joint state of a robot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from motion_sequencing.kinematics.configuration import Configuration


@dataclass(frozen=True)
class RobotState:
    """Joint names with their positions, velocities, and efforts.

    Any of the value tuples may be empty; an entirely empty state means "unspecified", in which
    case a motion planner falls back to its own default start state.
    """

    names: tuple[str, ...] = ()
    positions: tuple[float, ...] = ()
    velocities: tuple[float, ...] = ()
    efforts: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        """Verify that every non-empty value tuple matches the joint names."""
        for label, values in (
            ("positions", self.positions),
            ("velocities", self.velocities),
            ("efforts", self.efforts),
        ):
            if values and len(values) != len(self.names):
                raise ValueError(
                    f"RobotState has {len(self.names)} joint names but {len(values)} {label}.",
                )

    @property
    def is_empty(self) -> bool:
        """Check whether the state specifies nothing at all."""
        return not (self.names or self.positions or self.velocities or self.efforts)

    @classmethod
    def from_configurations(
        cls,
        positions: Configuration,
        velocities: Configuration | None = None,
    ) -> RobotState:
        """Construct a RobotState from joint-position (and optional joint-velocity) maps.

        :param positions: Map from joint names to positions (rad or m)
        :param velocities: Optional map from joint names to velocities (defaults to None)
        :return: Constructed RobotState, with joints ordered as in `positions`
        """
        names = tuple(positions.keys())
        joint_velocities = () if not velocities else tuple(velocities[n] for n in names)
        return cls(names, tuple(positions[n] for n in names), joint_velocities)

    @property
    def configuration(self) -> Configuration:
        """Retrieve the joint positions as a map from joint names to values."""
        return dict(zip(self.names, self.positions))
