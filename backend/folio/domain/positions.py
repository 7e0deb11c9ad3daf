"""
Position arithmetic for ordered children of a scope.

A scope (a portfolio for sections, a section for components) holding N
children keeps them at positions ``0..N-1`` with no gaps or duplicates.
Everything here is pure: callers read the current state, ask for a plan and
apply it to the store themselves.
"""
from dataclasses import dataclass
from typing import Optional

from .exceptions import ValidationFailed


@dataclass(frozen=True)
class PositionShift:
    """
    Siblings whose position lies in ``[lower, upper]`` move by ``delta``.
    ``upper=None`` leaves the range open towards the end of the scope.
    """

    lower: int
    upper: Optional[int]
    delta: int

    def covers(self, position: int) -> bool:
        if position < self.lower:
            return False
        return self.upper is None or position <= self.upper

    def apply(self, position: int) -> int:
        return position + self.delta if self.covers(position) else position


def next_position(current_count: int) -> int:
    """New children are always appended: the next slot is the current count."""
    return current_count


def plan_reorder(current: int, target: int, count: int) -> Optional[PositionShift]:
    """
    Plan moving the child at ``current`` to ``target`` in a scope of ``count``.

    Returns ``None`` when nothing moves. Only the siblings strictly between the
    old and new slot shift, each by exactly one.
    """
    max_position = count - 1

    if target < 0 or target > max_position:
        raise ValidationFailed(
            f"Position must be between 0 and {max_position}",
            details={"position": target, "max_position": max_position},
        )

    if target == current:
        return None

    if target < current:
        # moving earlier: open a slot at target
        return PositionShift(lower=target, upper=current - 1, delta=1)

    # moving later: close the slot left at current
    return PositionShift(lower=current + 1, upper=target, delta=-1)


def plan_removal(position: int) -> PositionShift:
    """Close the gap left by removing the child at ``position``."""
    return PositionShift(lower=position + 1, upper=None, delta=-1)

