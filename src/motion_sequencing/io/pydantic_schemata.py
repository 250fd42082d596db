"""Define Pydantic models for validating motion sequence and planning limits YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from motion_sequencing.io.yaml_utils import load_yaml_section
from motion_sequencing.kinematics import Point3D, RobotState
from motion_sequencing.motion_planning import (
    CartesianLimits,
    JointLimits,
    MotionGoal,
    MotionPlanRequest,
    PlanningLimits,
    SequenceItem,
    SequenceRequest,
)

XYZ = Tuple[float, float, float]
"""A three-tuple of floats representing an (x,y,z) position (meters)."""

# =============================================================================
# Sequence Schemata
# =============================================================================


class RobotStateSchema(BaseModel):
    """Schema for an explicit start state of a sequence item."""

    names: List[str] = Field(default_factory=list)
    positions: List[float] = Field(default_factory=list)
    velocities: List[float] = Field(default_factory=list)
    efforts: List[float] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_robot_state(self) -> RobotState:
        """Convert the validated data into a RobotState."""
        return RobotState(
            tuple(self.names),
            tuple(self.positions),
            tuple(self.velocities),
            tuple(self.efforts),
        )


class SequenceItemSchema(BaseModel):
    """Schema for one item of a motion sequence."""

    group: str = Field(min_length=1, description="Name of the joint group to be moved")
    joint_goal: Optional[Dict[str, float]] = None
    cartesian_goal: Optional[XYZ] = None
    start_state: Optional[RobotStateSchema] = None

    # Negative radii are rejected when the sequence is validated, not here
    blend_radius: float = Field(default=0.0, description="Blend radius (meters) into the next item")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def exactly_one_goal(self) -> SequenceItemSchema:
        """Verify that the item specifies exactly one of a joint or Cartesian goal."""
        if (self.joint_goal is None) == (self.cartesian_goal is None):
            raise ValueError("Each item must specify exactly one of joint_goal or cartesian_goal.")
        return self

    def to_sequence_item(self) -> SequenceItem:
        """Convert the validated data into a SequenceItem."""
        goal: MotionGoal
        if self.joint_goal is not None:
            goal = dict(self.joint_goal)
        else:
            goal = Point3D(*self.cartesian_goal)

        start_state = RobotState()
        if self.start_state is not None:
            start_state = self.start_state.to_robot_state()

        request = MotionPlanRequest(self.group, goal, start_state)
        return SequenceItem(request, self.blend_radius)


class SequenceRequestSchema(BaseModel):
    """Schema for an ordered list of motion sequence items."""

    items: List[SequenceItemSchema]

    model_config = ConfigDict(extra="forbid")

    def to_sequence_request(self) -> SequenceRequest:
        """Convert the validated data into a SequenceRequest."""
        return SequenceRequest(tuple(item.to_sequence_item() for item in self.items))


# =============================================================================
# Planning Limits Schemata
# =============================================================================


class JointLimitsSchema(BaseModel):
    """Schema for the limits of a single joint."""

    max_velocity: float = Field(gt=0, description="Maximum velocity (rad/s or m/s)")
    max_acceleration: float = Field(gt=0, description="Maximum acceleration (rad/s^2 or m/s^2)")
    max_deceleration: float = Field(le=0, description="Maximum deceleration (non-positive)")

    model_config = ConfigDict(extra="forbid")


class CartesianLimitsSchema(BaseModel):
    """Schema for the Cartesian limits of a robot's tip frames."""

    max_trans_vel: float = Field(gt=0, description="Maximum translational velocity (m/s)")
    max_trans_acc: float = Field(gt=0, description="Maximum translational acceleration (m/s^2)")
    max_trans_dec: float = Field(le=0, description="Maximum translational deceleration (m/s^2)")
    max_rot_vel: float = Field(gt=0, description="Maximum rotational velocity (rad/s)")

    model_config = ConfigDict(extra="forbid")


class PlanningLimitsSchema(BaseModel):
    """Schema for the aggregated limits used to configure trajectory blending."""

    joint_limits: Dict[str, JointLimitsSchema] = Field(default_factory=dict)
    cartesian_limits: Optional[CartesianLimitsSchema] = None

    model_config = ConfigDict(extra="forbid")

    def to_planning_limits(self) -> PlanningLimits:
        """Convert the validated data into a PlanningLimits container."""
        joint_limits = {
            name: JointLimits(**limits.model_dump()) for name, limits in self.joint_limits.items()
        }
        cartesian = None
        if self.cartesian_limits is not None:
            cartesian = CartesianLimits(**self.cartesian_limits.model_dump())
        return PlanningLimits(joint_limits, cartesian)


# =============================================================================
# Loading Functions
# =============================================================================


def load_sequence_request(yaml_path: Path) -> SequenceRequest:
    """Load and validate a motion sequence from the `items` key of a YAML file.

    :param yaml_path: Path to a YAML file specifying a motion sequence
    :return: Constructed SequenceRequest instance
    :raises ValueError: If the YAML data does not match the sequence schema
    """
    items_data = load_yaml_section(yaml_path, "items")
    try:
        schema = SequenceRequestSchema.model_validate({"items": items_data})
    except ValidationError as error:
        raise ValueError(f"Invalid motion sequence in {yaml_path}:\n{error}") from error

    return schema.to_sequence_request()


def load_planning_limits(yaml_path: Path) -> PlanningLimits:
    """Load and validate joint and Cartesian limits from the `planning_limits` key of a YAML file.

    :param yaml_path: Path to a YAML file specifying planning limits
    :return: Constructed PlanningLimits instance
    :raises ValueError: If the YAML data does not match the limits schema
    """
    limits_data = load_yaml_section(yaml_path, "planning_limits")
    try:
        schema = PlanningLimitsSchema.model_validate(limits_data)
    except ValidationError as error:
        raise ValueError(f"Invalid planning limits in {yaml_path}:\n{error}") from error

    return schema.to_planning_limits()
