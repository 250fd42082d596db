"""Define dataclasses to represent ordered sequences of motion planning requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from motion_sequencing.motion_planning.motion_plan_request import MotionPlanRequest


@dataclass(frozen=True)
class SequenceItem:
    """One segment of a motion sequence: a planning request and its requested blend radius."""

    request: MotionPlanRequest

    blend_radius: float = 0.0
    """Radius (meters) of the blend from this segment into the next (0.0 means no blending)."""

    @property
    def group_name(self) -> str:
        """Retrieve the name of the joint group targeted by the item."""
        return self.request.group_name

    @property
    def has_start_state(self) -> bool:
        """Check whether the item specifies an explicit (non-empty) start state."""
        return not self.request.start_state.is_empty


@dataclass(frozen=True)
class SequenceRequest:
    """An ordered sequence of items; the order of the items defines their execution order."""

    items: tuple[SequenceItem, ...] = ()

    def __len__(self) -> int:
        """Return the number of items in the sequence."""
        return len(self.items)

    def __iter__(self) -> Iterator[SequenceItem]:
        """Provide an iterator over the items in execution order."""
        return iter(self.items)

    def __getitem__(self, index: int) -> SequenceItem:
        """Retrieve the item at the given index."""
        return self.items[index]

    @property
    def group_names(self) -> list[str]:
        """Retrieve the names of all groups in the sequence, in order of first appearance."""
        return list(dict.fromkeys(item.group_name for item in self.items))
