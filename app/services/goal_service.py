"""Goal service - season objectives and their lifecycle."""
import logging
from datetime import datetime
from typing import Optional

from app.errors import NotFoundError
from app.models.goal import Goal, GoalCreate, GoalState, GoalTransitionResult
from app.utils.dates import parse_match_date, to_store_datetime
from app.utils.ids import to_object_id
from app.utils.objectives import GoalChange, plan_progress, plan_toggle


logger = logging.getLogger(__name__)


class GoalService:
    """Service for handling objective operations."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.goals = db["goals"]

    def _doc_to_goal(self, doc: dict) -> Goal:
        """
        Convert database document to Goal model.

        Handles datetime to date conversion for the deadline.
        """
        return Goal(
            _id=str(doc["_id"]),
            player_id=doc["player_id"],
            title=doc["title"],
            skill_id=doc.get("skill_id"),
            target_value=doc["target_value"],
            current_value=doc.get("current_value", 0),
            deadline=parse_match_date(doc["deadline"]),
            completed=doc.get("completed", False),
            created_at=doc["created_at"],
            updated_at=doc["updated_at"],
        )

    async def create_goal(self, player_id: str, goal_create: GoalCreate) -> Goal:
        """
        Create a new objective with no progress.

        Args:
            player_id: Owning player ID
            goal_create: Objective data

        Returns:
            Created objective
        """
        now = datetime.utcnow()
        goal_doc = {
            "player_id": player_id,
            "title": goal_create.title,
            "skill_id": goal_create.skill_id,
            "target_value": goal_create.target_value,
            "current_value": 0,
            "deadline": to_store_datetime(goal_create.deadline),
            "completed": False,
            "created_at": now,
            "updated_at": now,
        }

        result = await self.goals.insert_one(goal_doc)
        goal_doc["_id"] = result.inserted_id

        return self._doc_to_goal(goal_doc)

    async def list_goals(
        self,
        player_id: str,
        state: Optional[GoalState] = None,
    ) -> list[Goal]:
        """
        List a player's objectives.

        Args:
            player_id: Player ID
            state: Optional lifecycle state filter

        Returns:
            List of objectives
        """
        query = {"player_id": player_id}
        if state is not None:
            query["completed"] = state == GoalState.COMPLETED

        cursor = self.goals.find(query)
        goal_docs = await cursor.to_list(length=None)
        return [self._doc_to_goal(doc) for doc in goal_docs]

    async def get_goal(self, player_id: str, goal_id: str) -> Goal:
        """
        Get a single objective.

        Raises:
            NotFoundError: If objective not found for this player
        """
        goal_doc = await self.goals.find_one({
            "_id": to_object_id(goal_id, "Goal"),
            "player_id": player_id,
        })

        if not goal_doc:
            raise NotFoundError("Goal")

        return self._doc_to_goal(goal_doc)

    async def _commit(self, goal: Goal, plan: GoalChange) -> GoalTransitionResult:
        """
        Write a planned change as a partial update.

        Only the changed fields are sent. The returned objective is the
        document the store committed, never the locally proposed one.
        """
        updated_doc = await self.goals.find_one_and_update(
            {"_id": to_object_id(goal.id, "Goal"), "player_id": goal.player_id},
            {"$set": {**plan.changes, "updated_at": datetime.utcnow()}},
            return_document=True,
        )

        if not updated_doc:
            raise NotFoundError("Goal")

        committed = self._doc_to_goal(updated_doc)
        if plan.event is not None:
            logger.info("Goal %s: %s", committed.id, plan.event.value)

        return GoalTransitionResult(goal=committed, event=plan.event)

    async def update_progress(
        self,
        player_id: str,
        goal_id: str,
        delta: int,
    ) -> GoalTransitionResult:
        """
        Apply a signed progress increment.

        Raises:
            NotFoundError: If objective not found
            FieldValidationError: If progress would go below zero
        """
        goal = await self.get_goal(player_id, goal_id)
        return await self._commit(goal, plan_progress(goal, delta))

    async def toggle_complete(
        self,
        player_id: str,
        goal_id: str,
    ) -> GoalTransitionResult:
        """
        Flip the completed flag regardless of progress.

        Raises:
            NotFoundError: If objective not found
        """
        goal = await self.get_goal(player_id, goal_id)
        return await self._commit(goal, plan_toggle(goal))

    async def delete_goal(self, player_id: str, goal_id: str) -> dict:
        """
        Delete an objective.

        Returns:
            Dictionary with deleted_count

        Raises:
            NotFoundError: If objective not found
        """
        result = await self.goals.delete_one({
            "_id": to_object_id(goal_id, "Goal"),
            "player_id": player_id,
        })

        if result.deleted_count == 0:
            raise NotFoundError("Goal")

        return {"deleted_count": result.deleted_count}
