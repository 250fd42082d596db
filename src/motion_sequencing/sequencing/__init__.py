"""Import classes and definitions for solving sequences of blended motions."""

from .blend_radii import BlendRadii as BlendRadii
from .blend_radii import incoming_blend_radius as incoming_blend_radius
from .blend_radii import resolve_blend_radii as resolve_blend_radii
from .blending import BlenderFactory as BlenderFactory
from .blending import BlendRequest as BlendRequest
from .blending import BlendResponse as BlendResponse
from .blending import TrajectoryBlender as TrajectoryBlender
from .errors import BlendingFailedError as BlendingFailedError
from .errors import InvalidRadiusError as InvalidRadiusError
from .errors import LastBlendRadiusNonZeroError as LastBlendRadiusNonZeroError
from .errors import LastSegmentBlendRadiusError as LastSegmentBlendRadiusError
from .errors import NegativeBlendRadiusError as NegativeBlendRadiusError
from .errors import OverlappingBlendRadiiError as OverlappingBlendRadiiError
from .errors import PlanningFailedError as PlanningFailedError
from .errors import SequenceError as SequenceError
from .errors import StartStateConflictError as StartStateConflictError
from .overlap_detection import check_for_overlapping_radii as check_for_overlapping_radii
from .plan_components_builder import PlanComponentsBuilder as PlanComponentsBuilder
from .sequence_manager import SequenceManager as SequenceManager
from .sequence_planner import SequencePlanner as SequencePlanner
from .sequence_planner import SequencePlanningResult as SequencePlanningResult
from .sequence_validation import validate_sequence as validate_sequence
from .trajectory_assembly import TrajectoryAssembler as TrajectoryAssembler
from .trajectory_assembly import remove_duplicate_time_points as remove_duplicate_time_points
