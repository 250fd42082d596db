"""Define dataclasses to represent the joint and Cartesian limits used to configure blending."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class JointLimits:
    """Velocity and acceleration bounds of a single joint."""

    max_velocity: float
    """Maximum absolute velocity (rad/s or m/s)."""

    max_acceleration: float
    """Maximum acceleration (rad/s^2 or m/s^2)."""

    max_deceleration: float
    """Maximum deceleration, expressed as a non-positive value (rad/s^2 or m/s^2)."""

    def __post_init__(self) -> None:
        """Verify that the limits have the expected signs."""
        if self.max_velocity <= 0.0 or self.max_acceleration <= 0.0:
            raise ValueError(f"Joint velocity/acceleration limits must be positive: {self}")
        if self.max_deceleration > 0.0:
            raise ValueError(f"Joint deceleration limit must be non-positive: {self}")


@dataclass(frozen=True)
class CartesianLimits:
    """Bounds on the Cartesian motion of a group's tip frame."""

    max_trans_vel: float  # m/s
    max_trans_acc: float  # m/s^2
    max_trans_dec: float  # m/s^2, non-positive
    max_rot_vel: float  # rad/s


@dataclass(frozen=True)
class PlanningLimits:
    """Aggregated joint and Cartesian limits of a robot."""

    joint_limits: dict[str, JointLimits] = field(default_factory=dict)
    cartesian_limits: CartesianLimits | None = None

    def has_joint_limits(self, joint_names: list[str]) -> bool:
        """Check whether limits are known for every one of the named joints."""
        return all(name in self.joint_limits for name in joint_names)
