"""Comment service - match discussion threads."""
import logging
from datetime import datetime, timezone

from app.errors import NotFoundError
from app.models.comment import Comment, CommentCreate, CommentThread
from app.utils.comments import prepend, sort_thread, validate_comment
from app.utils.dates import parse_timestamp
from app.utils.ids import to_object_id


logger = logging.getLogger(__name__)


class CommentService:
    """Service for handling comment operations."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.comments = db["comments"]
        self.games = db["games"]

    def _doc_to_comment(self, doc: dict) -> Comment:
        """Convert database document to Comment model."""
        return Comment(
            _id=str(doc["_id"]),
            game_id=doc["game_id"],
            author=doc["author"],
            body=doc["body"],
            timestamp=parse_timestamp(doc["timestamp"]),
        )

    async def _ensure_game(self, game_id: str) -> None:
        """Comments only exist for existing games."""
        game = await self.games.find_one({"_id": to_object_id(game_id, "Game")})
        if not game:
            raise NotFoundError("Game")

    async def list_comments(self, game_id: str) -> list[Comment]:
        """
        List a game's comments, most recent first.

        Raises:
            NotFoundError: If game not found
        """
        await self._ensure_game(game_id)

        cursor = self.comments.find({"game_id": game_id})
        comment_docs = await cursor.to_list(length=None)
        return sort_thread(self._doc_to_comment(doc) for doc in comment_docs)

    async def create_comment(
        self,
        game_id: str,
        comment_create: CommentCreate,
    ) -> Comment:
        """
        Add a comment to a game.

        Validation runs before any store call.

        Raises:
            FieldValidationError: If author or body is empty after trimming
            NotFoundError: If game not found
        """
        comment_create = validate_comment(comment_create)
        await self._ensure_game(game_id)

        comment_doc = {
            "game_id": game_id,
            "author": comment_create.author,
            "body": comment_create.body,
            "timestamp": datetime.now(timezone.utc),
        }

        result = await self.comments.insert_one(comment_doc)
        comment_doc["_id"] = result.inserted_id

        logger.info("Added comment %s to game %s", result.inserted_id, game_id)
        return self._doc_to_comment(comment_doc)

    async def post_comment(
        self,
        game_id: str,
        comment_create: CommentCreate,
    ) -> CommentThread:
        """
        Add a comment and return the updated thread.

        The thread is read before the insert; the new comment goes to the
        front of it.
        """
        comment_create = validate_comment(comment_create)
        thread = await self.list_comments(game_id)
        comment = await self.create_comment(game_id, comment_create)
        return CommentThread(game_id=game_id, comments=prepend(thread, comment))
