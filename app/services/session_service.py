"""Session service - current player selection and its persisted fallback."""
import logging
from datetime import datetime
from typing import Optional

from app.errors import NotFoundError
from app.models.session import SessionToken
from app.services.player_service import PlayerService
from app.utils.session_token import create_session_token


logger = logging.getLogger(__name__)

SELECTION_ID = "current_player"


class SessionService:
    """Service for switching and resolving the current player."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.selections = db["selections"]
        self.player_service = PlayerService(db)

    async def switch_player(self, player_id: str) -> SessionToken:
        """
        Select a player and remember the choice.

        Args:
            player_id: Player to select

        Returns:
            Session token bound to the player

        Raises:
            NotFoundError: If player not found
        """
        player = await self.player_service.get_player(player_id)

        await self.selections.update_one(
            {"_id": SELECTION_ID},
            {"$set": {"player_id": player.id, "selected_at": datetime.utcnow()}},
            upsert=True,
        )

        logger.info("Switched current player to %s", player.id)
        return SessionToken(
            access_token=create_session_token(player.id),
            player=player,
        )

    async def last_selected_player_id(self) -> Optional[str]:
        """ID of the most recently selected player, if any was persisted."""
        selection = await self.selections.find_one({"_id": SELECTION_ID})
        if not selection:
            return None
        return selection.get("player_id")

    async def resume(self) -> SessionToken:
        """
        Resolve the current player at session start.

        Uses the most recently selected player when it still exists,
        otherwise the first profile.

        Raises:
            NotFoundError: If there are no player profiles
        """
        players = await self.player_service.list_players()
        if not players:
            raise NotFoundError("Player")

        saved_id = await self.last_selected_player_id()
        player = next((p for p in players if p.id == saved_id), players[0])

        if saved_id is not None and player.id != saved_id:
            logger.warning(
                "Last selected player %s no longer exists; using %s", saved_id, player.id
            )

        return SessionToken(
            access_token=create_session_token(player.id),
            player=player,
        )
