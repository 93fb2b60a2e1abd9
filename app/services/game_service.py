"""Game service - business logic for logged matches."""
import logging
from datetime import datetime
from typing import Optional

from app.errors import NotFoundError
from app.models.game import Game, GameCreate, GameUpdate, Result
from app.utils.analytics import match_history
from app.utils.dates import parse_match_date, to_store_datetime
from app.utils.ids import to_object_id


logger = logging.getLogger(__name__)


class GameService:
    """Service for handling game operations."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.games = db["games"]
        self.comments = db["comments"]

    def _doc_to_game(self, doc: dict) -> Game:
        """
        Convert database document to Game model.

        Missing counters read as 0; the stored date may be a datetime or a
        string in any format parse_match_date accepts.
        """
        return Game(
            _id=str(doc["_id"]),
            player_id=doc["player_id"],
            date=parse_match_date(doc["date"]),
            opponent=doc["opponent"],
            location=doc["location"],
            result=doc["result"],
            position=doc["position"],
            duration=doc["duration"],
            goals=doc.get("goals") or 0,
            assists=doc.get("assists") or 0,
            passes=doc.get("passes") or 0,
            notes=doc.get("notes", ""),
            completed=doc.get("completed", True),
            played_full_match=doc.get("played_full_match", True),
            created_at=doc["created_at"],
            updated_at=doc["updated_at"],
        )

    def _game_fields(self, game: GameCreate) -> dict:
        """Store representation of the user-editable game fields."""
        fields = game.model_dump(mode="python")
        fields["date"] = to_store_datetime(game.date)
        fields["location"] = game.location.value
        fields["result"] = game.result.value
        return fields

    async def create_game(self, player_id: str, game_create: GameCreate) -> Game:
        """
        Log a new match for a player.

        Args:
            player_id: Owning player ID
            game_create: Match data

        Returns:
            Created game
        """
        now = datetime.utcnow()
        game_doc = {
            "player_id": player_id,
            **self._game_fields(game_create),
            "created_at": now,
            "updated_at": now,
        }

        result = await self.games.insert_one(game_doc)
        game_doc["_id"] = result.inserted_id

        logger.info("Logged game %s for player %s", result.inserted_id, player_id)
        return self._doc_to_game(game_doc)

    async def list_games(self, player_id: str) -> list[Game]:
        """
        List a player's games in store order.

        Args:
            player_id: Player ID

        Returns:
            List of games
        """
        cursor = self.games.find({"player_id": player_id})
        game_docs = await cursor.to_list(length=None)
        return [self._doc_to_game(doc) for doc in game_docs]

    async def list_history(
        self,
        player_id: str,
        result: Optional[Result] = None,
    ) -> list[Game]:
        """Match history: optionally filtered by result, most recent first."""
        return match_history(await self.list_games(player_id), result=result)

    async def get_game(self, player_id: str, game_id: str) -> Game:
        """
        Get a single game.

        Raises:
            NotFoundError: If game not found for this player
        """
        game_doc = await self.games.find_one({
            "_id": to_object_id(game_id, "Game"),
            "player_id": player_id,
        })

        if not game_doc:
            raise NotFoundError("Game")

        return self._doc_to_game(game_doc)

    async def replace_game(
        self,
        player_id: str,
        game_id: str,
        game_create: GameCreate,
    ) -> Game:
        """
        Replace every editable field of a game.

        Raises:
            NotFoundError: If game not found for this player
        """
        update_doc = {
            **self._game_fields(game_create),
            "updated_at": datetime.utcnow(),
        }

        updated_doc = await self.games.find_one_and_update(
            {"_id": to_object_id(game_id, "Game"), "player_id": player_id},
            {"$set": update_doc},
            return_document=True,
        )

        if not updated_doc:
            raise NotFoundError("Game")

        return self._doc_to_game(updated_doc)

    async def update_game(
        self,
        player_id: str,
        game_id: str,
        game_update: GameUpdate,
    ) -> Game:
        """
        Update the provided fields of a game.

        Raises:
            NotFoundError: If game not found for this player
        """
        update_doc = game_update.model_dump(exclude_none=True)
        if "date" in update_doc:
            update_doc["date"] = to_store_datetime(game_update.date)
        if game_update.location is not None:
            update_doc["location"] = game_update.location.value
        if game_update.result is not None:
            update_doc["result"] = game_update.result.value
        update_doc["updated_at"] = datetime.utcnow()

        updated_doc = await self.games.find_one_and_update(
            {"_id": to_object_id(game_id, "Game"), "player_id": player_id},
            {"$set": update_doc},
            return_document=True,
        )

        if not updated_doc:
            raise NotFoundError("Game")

        return self._doc_to_game(updated_doc)

    async def delete_game(self, player_id: str, game_id: str) -> dict:
        """
        Delete a game and its comments.

        Returns:
            Dictionary with deleted_count and deleted_comments

        Raises:
            NotFoundError: If game not found for this player
        """
        object_id = to_object_id(game_id, "Game")

        result = await self.games.delete_one({"_id": object_id, "player_id": player_id})
        if result.deleted_count == 0:
            raise NotFoundError("Game")

        comments = await self.comments.delete_many({"game_id": game_id})

        logger.info(
            "Deleted game %s with %d comments", game_id, comments.deleted_count
        )
        return {
            "deleted_count": result.deleted_count,
            "deleted_comments": comments.deleted_count,
        }
