"""Player service - business logic for player profiles."""
import logging
from datetime import date, datetime

from app.errors import NotFoundError
from app.models.player import Player, PlayerCreate
from app.utils.dates import parse_match_date, to_store_datetime
from app.utils.ids import to_object_id


logger = logging.getLogger(__name__)


class PlayerService:
    """Service for handling player profile operations."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.players = db["players"]

    def _doc_to_player(self, doc: dict) -> Player:
        """Convert database document to Player model."""
        return Player(
            _id=str(doc["_id"]),
            name=doc["name"],
            position=doc["position"],
            joined_date=parse_match_date(doc["joined_date"]),
        )

    async def create_player(self, player_create: PlayerCreate) -> Player:
        """
        Create a new player profile.

        Args:
            player_create: Profile data

        Returns:
            Created player
        """
        joined = player_create.joined_date or date.today()
        player_doc = {
            "name": player_create.name,
            "position": player_create.position,
            "joined_date": to_store_datetime(joined),
            "created_at": datetime.utcnow(),
        }

        result = await self.players.insert_one(player_doc)
        player_doc["_id"] = result.inserted_id

        logger.info("Created player profile %s", result.inserted_id)
        return self._doc_to_player(player_doc)

    async def list_players(self) -> list[Player]:
        """List all player profiles in creation order."""
        cursor = self.players.find({})
        player_docs = await cursor.to_list(length=None)
        return [self._doc_to_player(doc) for doc in player_docs]

    async def get_player(self, player_id: str) -> Player:
        """
        Get a single player by ID.

        Raises:
            NotFoundError: If player not found
        """
        player_doc = await self.players.find_one(
            {"_id": to_object_id(player_id, "Player")}
        )

        if not player_doc:
            raise NotFoundError("Player")

        return self._doc_to_player(player_doc)
