"""Define classes to represent planned trajectories of a joint group."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from motion_sequencing.kinematics.robot_state import RobotState

if TYPE_CHECKING:
    from collections.abc import Iterator

    from motion_sequencing.kinematics import Configuration


@dataclass(frozen=True)
class TrajectoryPoint:
    """A planned state of joint values at a specified time in a trajectory."""

    time_s: float
    """Time (seconds) since the trajectory started."""

    positions: Configuration
    velocities: Configuration = field(default_factory=dict)

    @property
    def joint_names(self) -> list[str]:
        """Retrieve the names of the joints specified by the point."""
        return list(self.positions.keys())

    def shifted(self, offset_s: float) -> TrajectoryPoint:
        """Return a copy of the point with its time shifted by the given offset (seconds)."""
        return replace(self, time_s=self.time_s + offset_s)

    def approx_equal(self, other: TrajectoryPoint, atol: float) -> bool:
        """Check whether another point has the same joints at positions within a tolerance."""
        if self.joint_names != other.joint_names:
            return False
        return all(abs(self.positions[j] - other.positions[j]) <= atol for j in self.positions)


@dataclass
class Trajectory:
    """A sequence of planned configurations of a named joint group at specified times."""

    group_name: str
    points: list[TrajectoryPoint] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Verify properties expected of any valid trajectory."""
        if not self.points:
            return

        # All points in any non-empty trajectory should use the same joint names
        j0_names = self.points[0].joint_names
        for p in self.points[1:]:
            jn_names = p.joint_names
            if j0_names != jn_names:
                raise ValueError(f"Trajectory points used joint names: {j0_names} and {jn_names}.")

        for prev, curr in zip(self.points, self.points[1:]):
            if curr.time_s < prev.time_s:
                raise ValueError(f"Trajectory time decreases from {prev.time_s} to {curr.time_s}.")

    def __len__(self) -> int:
        """Return the number of waypoints in the trajectory."""
        return len(self.points)

    def __getitem__(self, index: int) -> TrajectoryPoint:
        """Retrieve the waypoint at the given index."""
        return self.points[index]

    def __iter__(self) -> Iterator[TrajectoryPoint]:
        """Provide an iterator over the trajectory's waypoints in time order."""
        return iter(self.points)

    @property
    def joint_names(self) -> list[str]:
        """Retrieve the names of the joints specified by the trajectory."""
        return [] if not self.points else self.points[0].joint_names

    @property
    def first_point(self) -> TrajectoryPoint:
        """Retrieve the first waypoint of the trajectory."""
        if not self.points:
            raise IndexError(f"Trajectory for group '{self.group_name}' has no waypoints.")
        return self.points[0]

    @property
    def last_point(self) -> TrajectoryPoint:
        """Retrieve the last waypoint of the trajectory."""
        if not self.points:
            raise IndexError(f"Trajectory for group '{self.group_name}' has no waypoints.")
        return self.points[-1]

    @property
    def duration_s(self) -> float:
        """Retrieve the duration (seconds) of the trajectory."""
        return 0.0 if not self.points else self.points[-1].time_s

    @property
    def end_state(self) -> RobotState:
        """Convert the trajectory's last waypoint into a robot state."""
        last = self.last_point
        return RobotState.from_configurations(last.positions, last.velocities)

    def time_from_start(self, index: int) -> float:
        """Retrieve the time (seconds) since the start of the trajectory of the indexed waypoint."""
        return self.points[index].time_s

    def remove_point(self, index: int) -> TrajectoryPoint:
        """Remove and return the waypoint at the given index."""
        return self.points.pop(index)

    def copy(self) -> Trajectory:
        """Create a copy of the trajectory that owns its own list of waypoints."""
        return Trajectory(self.group_name, list(self.points))

    def append_trajectory(
        self,
        other: Trajectory,
        gap_s: float = 0.0,
        *,
        skip_first: bool = False,
    ) -> None:
        """Append the waypoints of another trajectory, shifted to start where this one ends.

        :param other: Trajectory whose waypoints are appended (its relative timing is preserved)
        :param gap_s: Duration (seconds) between this trajectory's end and the first appended point
        :param skip_first: Whether to omit the other trajectory's first waypoint
        """
        if not other.points:
            return

        offset_s = self.duration_s + gap_s - other.points[0].time_s
        new_points = other.points[1:] if skip_first else other.points
        self.points.extend(p.shifted(offset_s) for p in new_points)
