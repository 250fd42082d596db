"""Import classes and definitions enabling motion planning."""

from .limits import CartesianLimits as CartesianLimits
from .limits import JointLimits as JointLimits
from .limits import PlanningLimits as PlanningLimits
from .motion_plan_request import MotionGoal as MotionGoal
from .motion_plan_request import MotionPlanRequest as MotionPlanRequest
from .motion_plan_request import MotionPlanResponse as MotionPlanResponse
from .motion_plan_request import PlanningErrorCode as PlanningErrorCode
from .motion_planner import MotionPlanner as MotionPlanner
from .sequence_request import SequenceItem as SequenceItem
from .sequence_request import SequenceRequest as SequenceRequest
from .trajectories import Trajectory as Trajectory
from .trajectories import TrajectoryPoint as TrajectoryPoint
