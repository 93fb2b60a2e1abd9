"""Comment model definitions."""
from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    """
    Comment creation model.

    Fields are validated by CommentService (trimmed, non-empty) so that
    every field error is reported together before the store is touched.
    """

    author: str = ""
    body: str = ""


class Comment(BaseModel):
    """Full comment model with database fields."""

    id: str = Field(alias="_id", serialization_alias="id")
    game_id: str
    author: str
    body: str
    timestamp: datetime

    model_config = {"populate_by_name": True}


class CommentThread(BaseModel):
    """A game's comments, most recent first."""

    game_id: str
    comments: list[Comment]
