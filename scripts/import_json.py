"""One-time import: load a JSON record dump into MongoDB.

The dump holds top-level ``players``, ``games``, ``goals`` and ``comments``
lists with camelCase fields and integer ids, e.g. a json-server ``db.json``.
Ids are remapped to MongoDB ObjectIds; references follow the mapping.

Usage:
    python scripts/import_json.py \\
        --source /path/to/db.json \\
        --mongodb-url mongodb://localhost:27017
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from motor.motor_asyncio import AsyncIOMotorClient
from pydantic import ValidationError

from app.config import settings
from app.errors import FieldValidationError
from app.models.comment import CommentCreate
from app.models.game import GameCreate
from app.models.goal import GoalCreate
from app.models.player import PlayerCreate
from app.services.game_service import GameService
from app.services.goal_service import GoalService
from app.services.player_service import PlayerService
from app.utils.comments import validate_comment
from app.utils.dates import parse_timestamp
from app.utils.ids import to_object_id


class JsonImporter:
    """Imports a JSON record dump into MongoDB."""

    def __init__(self, source_path: Path, mongodb_url: str, db_name: str):
        """Initialize importer.

        Args:
            source_path: Path to the JSON dump
            mongodb_url: MongoDB connection URL
            db_name: Target database name
        """
        self.source_path = source_path
        self.mongodb_url = mongodb_url
        self.db_name = db_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.db = None

        # Old id -> new id, per entity
        self.player_ids: dict[str, str] = {}
        self.game_ids: dict[str, str] = {}

        # Stats
        self.stats = {
            name: {"total": 0, "success": 0, "failed": 0}
            for name in ("players", "games", "goals", "comments")
        }

    async def connect(self):
        """Connect to MongoDB."""
        self.client = AsyncIOMotorClient(self.mongodb_url)
        self.db = self.client[self.db_name]
        print(f"Connected to MongoDB: {self.db_name}")

    async def close(self):
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            print("Closed MongoDB connection")

    def _failed(self, entity: str, record: dict, error: Exception):
        self.stats[entity]["failed"] += 1
        print(f"  ✗ {entity[:-1]} {record.get('id')}: {error}")

    async def import_players(self, records: list[dict]):
        """Import player profiles."""
        print("\n=== Importing Players ===")
        service = PlayerService(self.db)

        for record in records:
            self.stats["players"]["total"] += 1
            try:
                player = await service.create_player(PlayerCreate(
                    name=record["name"],
                    position=record["position"],
                    joined_date=record.get("joinedDate"),
                ))
            except (KeyError, ValidationError) as e:
                self._failed("players", record, e)
                continue

            self.player_ids[str(record["id"])] = player.id
            self.stats["players"]["success"] += 1
            print(f"  ✓ {player.name}")

    async def import_games(self, records: list[dict]):
        """Import logged games, skipping those of unknown players."""
        print("\n=== Importing Games ===")
        service = GameService(self.db)

        for record in records:
            self.stats["games"]["total"] += 1
            player_id = self.player_ids.get(str(record.get("playerId")))
            if player_id is None:
                self._failed("games", record, ValueError("unknown player"))
                continue

            try:
                game = await service.create_game(player_id, GameCreate(
                    date=record["date"],
                    opponent=record["opponent"],
                    location=record["location"],
                    result=record.get("result", "Win"),
                    position=record["position"],
                    duration=int(record["duration"]),
                    goals=int(record.get("goals") or 0),
                    assists=int(record.get("assists") or 0),
                    passes=int(record.get("passes") or 0),
                    notes=record.get("notes", ""),
                    completed=record.get("completed", True),
                    played_full_match=record.get("playedFullMatch", True),
                ))
            except (KeyError, ValueError, ValidationError) as e:
                self._failed("games", record, e)
                continue

            self.game_ids[str(record["id"])] = game.id
            self.stats["games"]["success"] += 1

    async def import_goals(self, records: list[dict]):
        """Import objectives, keeping their progress and completed flag."""
        print("\n=== Importing Goals ===")
        service = GoalService(self.db)

        for record in records:
            self.stats["goals"]["total"] += 1
            player_id = self.player_ids.get(str(record.get("playerId")))
            if player_id is None:
                self._failed("goals", record, ValueError("unknown player"))
                continue

            try:
                skill_id = record.get("skillId")
                goal = await service.create_goal(player_id, GoalCreate(
                    title=record["title"],
                    skill_id=str(skill_id) if skill_id is not None else None,
                    target_value=int(record["targetValue"]),
                    deadline=record["deadline"],
                ))
            except (KeyError, ValueError, ValidationError) as e:
                self._failed("goals", record, e)
                continue

            current_value = max(int(record.get("currentValue") or 0), 0)
            completed = bool(record.get("completed", False))
            if current_value or completed:
                await service.goals.update_one(
                    {"_id": to_object_id(goal.id, "Goal")},
                    {"$set": {"current_value": current_value, "completed": completed}},
                )

            self.stats["goals"]["success"] += 1

    async def import_comments(self, records: list[dict]):
        """Import comments with their original timestamps."""
        print("\n=== Importing Comments ===")
        comments = self.db["comments"]

        for record in records:
            self.stats["comments"]["total"] += 1
            game_id = self.game_ids.get(str(record.get("gameId")))
            if game_id is None:
                self._failed("comments", record, ValueError("unknown game"))
                continue

            try:
                comment = validate_comment(CommentCreate(
                    author=record.get("author", ""),
                    body=record.get("body", ""),
                ))
                timestamp = parse_timestamp(record["timestamp"])
            except (KeyError, ValueError, FieldValidationError) as e:
                self._failed("comments", record, e)
                continue

            await comments.insert_one({
                "game_id": game_id,
                "author": comment.author,
                "body": comment.body,
                "timestamp": timestamp,
            })
            self.stats["comments"]["success"] += 1

    async def run(self):
        """Run import."""
        print(f"Starting import from {self.source_path}")
        data = json.loads(self.source_path.read_text(encoding="utf-8"))

        await self.connect()

        try:
            await self.import_players(data.get("players", []))
            await self.import_games(data.get("games", []))
            await self.import_goals(data.get("goals", []))
            await self.import_comments(data.get("comments", []))

            # Print summary
            print("\n=== Import Summary ===")
            for entity_type, stats in self.stats.items():
                print(f"{entity_type.capitalize()}:")
                print(f"  Total: {stats['total']}")
                print(f"  Success: {stats['success']}")
                print(f"  Failed: {stats['failed']}")

        finally:
            await self.close()


async def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Import a JSON record dump into MongoDB")
    parser.add_argument(
        "--source",
        required=True,
        help="Path to the JSON dump (e.g. db.json)",
    )
    parser.add_argument(
        "--mongodb-url",
        default=settings.mongodb_url,
        help="MongoDB connection URL",
    )
    parser.add_argument(
        "--db-name",
        default=settings.mongodb_db_name,
        help="Target database name",
    )

    args = parser.parse_args()

    source_path = Path(args.source)
    if not source_path.exists():
        print(f"Error: Source path does not exist: {source_path}")
        sys.exit(1)

    importer = JsonImporter(
        source_path=source_path,
        mongodb_url=args.mongodb_url,
        db_name=args.db_name,
    )

    await importer.run()


if __name__ == "__main__":
    asyncio.run(main())
