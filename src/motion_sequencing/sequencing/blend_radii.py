"""Define functions to decide the effective blend radius between consecutive sequence items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from motion_sequencing.io.logging import SequenceDiagnostics

if TYPE_CHECKING:
    from motion_sequencing.kinematics import KinematicModel
    from motion_sequencing.motion_planning import SequenceItem, SequenceRequest

BlendRadii = Tuple[float, ...]
"""Effective blend radii (meters), where index i describes the blend between items i and i+1."""


def is_invalid_blend(
    model: KinematicModel,
    item_a: SequenceItem,
    item_b: SequenceItem,
    diagnostics: SequenceDiagnostics,
) -> bool:
    """Evaluate whether the blend requested from one item into the next cannot be performed.

    :param model: Kinematic model used to check whether the group has a solver
    :param item_a: Item requesting the blend
    :param item_b: Item following `item_a` in the sequence
    :param diagnostics: Channel receiving a warning explaining why a blend is invalid
    :return: True if a nonzero blend is requested but not allowed, else False
    """
    if item_a.blend_radius == 0.0:
        return False

    if item_a.group_name != item_b.group_name:
        diagnostics.warning(
            f"Blending between different groups (in this case: '{item_a.group_name}' "
            f"and '{item_b.group_name}') not allowed",
        )
        return True

    if not model.has_solver(item_a.group_name):
        diagnostics.warning(f"Blending for group '{item_a.group_name}' without solver not allowed")
        return True

    return False


def resolve_blend_radii(
    model: KinematicModel,
    request: SequenceRequest,
    diagnostics: SequenceDiagnostics | None = None,
) -> BlendRadii:
    """Compute the effective blend radius between every pair of consecutive items.

    Invalid blends degrade to zero (no blending) with a warning instead of failing.

    :param model: Kinematic model used to check which groups can be blended
    :param request: Sequence whose declared blend radii are resolved
    :param diagnostics: Optional diagnostics channel (defaults to this module's logger)
    :return: Tuple of N-1 effective radii (meters) for a sequence of N items
    """
    diagnostics = diagnostics or SequenceDiagnostics.for_module(__name__)
    radii = [0.0] * max(len(request) - 1, 0)

    for i in range(len(radii)):
        if is_invalid_blend(model, request[i], request[i + 1], diagnostics):
            diagnostics.warning(
                f"Invalid blend radii between commands: [{i}] and [{i + 1}] => "
                "Blend radii set to zero",
            )
            continue
        radii[i] = request[i].blend_radius

    return tuple(radii)


def incoming_blend_radius(radii: BlendRadii, index: int) -> float:
    """Retrieve the radius of the blend into the indexed segment.

    A blend radius is attached to the second trajectory of its blend, so segment i is blended
    into using the radius declared by item i-1. The first segment is never blended into.

    :param radii: Effective blend radii, indexed by the first item of each pair
    :param index: Index of the segment being blended into
    :return: Radius (meters) of the incoming blend
    """
    if index < 0:
        raise IndexError(f"Segment index must be non-negative, got {index}")
    return 0.0 if index == 0 else radii[index - 1]
