"""Game (logged match) model definitions."""
from datetime import date as date_type, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.utils.dates import parse_match_date


class Location(str, Enum):
    """Where the match was played."""

    HOME = "Home"
    AWAY = "Away"


class Result(str, Enum):
    """Match outcome from the player's side."""

    WIN = "Win"
    DRAW = "Draw"
    LOSS = "Loss"


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


class GameBase(BaseModel):
    """Base game fields."""

    date: date_type
    opponent: str
    location: Location
    result: Result = Result.WIN
    position: str
    duration: int = Field(gt=0, description="Minutes played")
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    passes: int = Field(default=0, ge=0)
    notes: str = ""
    completed: bool = True
    played_full_match: bool = True

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        """Accept any date representation the store or client may send."""
        return parse_match_date(value)

    @field_validator("opponent", "position")
    @classmethod
    def not_blank(cls, value: str) -> str:
        """Strip surrounding whitespace and reject empty values."""
        return _strip_required(value)


class GameCreate(GameBase):
    """Game creation model (also used for full replacement)."""

    pass


class GameUpdate(BaseModel):
    """Game update model - all fields optional."""

    date: Optional[date_type] = None
    opponent: Optional[str] = None
    location: Optional[Location] = None
    result: Optional[Result] = None
    position: Optional[str] = None
    duration: Optional[int] = Field(default=None, gt=0)
    goals: Optional[int] = Field(default=None, ge=0)
    assists: Optional[int] = Field(default=None, ge=0)
    passes: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    completed: Optional[bool] = None
    played_full_match: Optional[bool] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        """Accept any date representation the client may send."""
        if value is None:
            return value
        return parse_match_date(value)

    @field_validator("opponent", "position")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> Optional[str]:
        """Strip surrounding whitespace and reject empty values."""
        if value is None:
            return value
        return _strip_required(value)


class Game(GameBase):
    """Full game model with database fields."""

    id: str = Field(alias="_id", serialization_alias="id")
    player_id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"populate_by_name": True}
