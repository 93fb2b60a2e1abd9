"""Player profile model definitions."""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PlayerCreate(BaseModel):
    """Player profile creation model."""

    name: str
    position: str
    joined_date: Optional[date] = None  # defaults to today

    @field_validator("name", "position")
    @classmethod
    def not_blank(cls, value: str) -> str:
        """Strip surrounding whitespace and reject empty values."""
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class Player(BaseModel):
    """Full player model with database fields."""

    id: str = Field(alias="_id", serialization_alias="id")
    name: str
    position: str
    joined_date: date

    model_config = {"populate_by_name": True}
