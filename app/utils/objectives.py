"""
Objective lifecycle transitions.

Transitions are planned here as pure functions and committed by
GoalService. A plan carries only the fields that change, so the store
update never overwrites unrelated fields such as the title.
"""
from dataclasses import dataclass, field
from typing import Optional

from app.errors import FieldValidationError
from app.models.goal import Goal, GoalEvent


@dataclass
class GoalChange:
    """A proposed transition: the changed fields and the resulting event."""

    changes: dict = field(default_factory=dict)
    event: Optional[GoalEvent] = None


def plan_progress(goal: Goal, delta: int) -> GoalChange:
    """
    Plan a signed progress increment.

    Crossing the target from an active objective completes it
    (``target_reached``); falling below the target from a completed
    objective reopens it (``reopened``).

    Args:
        goal: Objective as last committed
        delta: Signed increment

    Returns:
        Proposed change

    Raises:
        FieldValidationError: If the new value would be negative
    """
    new_value = goal.current_value + delta
    if new_value < 0:
        raise FieldValidationError(
            {"current_value": "Progress cannot go below zero"}
        )

    plan = GoalChange(changes={"current_value": new_value})

    if new_value >= goal.target_value and not goal.completed:
        plan.changes["completed"] = True
        plan.event = GoalEvent.TARGET_REACHED
    elif new_value < goal.target_value and goal.completed:
        plan.changes["completed"] = False
        plan.event = GoalEvent.REOPENED

    return plan


def plan_toggle(goal: Goal) -> GoalChange:
    """Plan a manual completed flip; the progress value is left alone."""
    completed = not goal.completed
    return GoalChange(
        changes={"completed": completed},
        event=GoalEvent.MARKED_COMPLETE if completed else GoalEvent.MARKED_ACTIVE,
    )
