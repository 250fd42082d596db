"""Import classes and definitions for robot kinematics."""

from .configuration import Configuration as Configuration
from .kinematic_model import KinematicModel as KinematicModel
from .point3d import Point3D as Point3D
from .robot_state import RobotState as RobotState
