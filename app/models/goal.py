"""Objective (season goal) model definitions."""
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator


class GoalState(str, Enum):
    """Objective lifecycle states."""

    ACTIVE = "active"
    COMPLETED = "completed"


class GoalEvent(str, Enum):
    """Notification-worthy outcome of a lifecycle transition."""

    TARGET_REACHED = "target_reached"
    REOPENED = "reopened"
    MARKED_COMPLETE = "marked_complete"
    MARKED_ACTIVE = "marked_active"


class GoalBase(BaseModel):
    """Base objective fields."""

    title: str
    skill_id: Optional[str] = None
    target_value: int = Field(gt=0)
    deadline: date


class GoalCreate(GoalBase):
    """Objective creation model."""

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        """Strip surrounding whitespace and reject an empty title."""
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value


class GoalProgress(BaseModel):
    """Signed progress increment."""

    delta: int = 1


class Goal(GoalBase):
    """Full objective model with database fields and derived view fields."""

    id: str = Field(alias="_id", serialization_alias="id")
    player_id: str
    current_value: int = Field(default=0, ge=0)
    completed: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = {"populate_by_name": True}

    @computed_field
    @property
    def state(self) -> GoalState:
        """Lifecycle state derived from the completed flag."""
        return GoalState.COMPLETED if self.completed else GoalState.ACTIVE

    @computed_field
    @property
    def progress_percent(self) -> float:
        """Progress toward target, capped at 100."""
        return min(self.current_value * 100 / self.target_value, 100.0)


class GoalTransitionResult(BaseModel):
    """Committed objective plus the event its transition produced, if any."""

    goal: Goal
    event: Optional[GoalEvent] = None
