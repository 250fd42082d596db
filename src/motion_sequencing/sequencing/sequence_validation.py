"""Define structural checks run on a motion sequence before any planning begins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from motion_sequencing.sequencing.errors import (
    LastBlendRadiusNonZeroError,
    NegativeBlendRadiusError,
    StartStateConflictError,
)

if TYPE_CHECKING:
    from motion_sequencing.motion_planning import SequenceRequest


def check_non_negative_radii(request: SequenceRequest) -> None:
    """Verify that no item of the sequence requests a negative blend radius.

    :raises NegativeBlendRadiusError: If any item's blend radius is negative
    """
    for index, item in enumerate(request):
        if item.blend_radius < 0.0:
            raise NegativeBlendRadiusError(index, item.blend_radius)


def check_last_blend_radius_zero(request: SequenceRequest) -> None:
    """Verify that the last item of the sequence does not request a blend.

    :raises LastBlendRadiusNonZeroError: If the last item has a nonzero blend radius
    """
    if len(request) == 0:
        return

    last_radius = request[-1].blend_radius
    if last_radius != 0.0:
        raise LastBlendRadiusNonZeroError(last_radius)


def check_start_states_of_group(request: SequenceRequest, group_name: str) -> None:
    """Verify that only the first item of the named group specifies an explicit start state.

    Later items of the group start wherever the group's previous segment ended.

    :raises StartStateConflictError: If a later item of the group has a non-empty start state
    """
    group_indices = [i for i, item in enumerate(request) if item.group_name == group_name]

    for index in group_indices[1:]:
        if request[index].has_start_state:
            raise StartStateConflictError(group_name, index)


def check_start_states(request: SequenceRequest) -> None:
    """Verify the start-state rule for every group appearing in the sequence."""
    if len(request) <= 1:
        return

    for group_name in request.group_names:
        check_start_states_of_group(request, group_name)


def validate_sequence(request: SequenceRequest) -> None:
    """Run all structural checks on the sequence, raising the first error found."""
    check_non_negative_radii(request)
    check_last_blend_radius_zero(request)
    check_start_states(request)
