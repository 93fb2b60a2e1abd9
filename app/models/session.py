"""Session (current player selection) model definitions."""
from pydantic import BaseModel

from app.models.player import Player


class SessionSelect(BaseModel):
    """Request to switch the current player."""

    player_id: str


class SessionToken(BaseModel):
    """Session token bound to the current player."""

    access_token: str
    token_type: str = "bearer"
    player: Player
