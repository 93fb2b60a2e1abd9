"""Drop all match data for a specific player."""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from motor.motor_asyncio import AsyncIOMotorClient

from app.config import settings


async def drop_player_data(mongodb_url: str, player_id: str):
    """Delete a player's games, their comments, and the player's goals."""
    client = AsyncIOMotorClient(mongodb_url)
    db = client[settings.mongodb_db_name]

    game_ids = [
        str(doc["_id"])
        async for doc in db.games.find({"player_id": player_id}, {"_id": 1})
    ]

    result = await db.comments.delete_many({"game_id": {"$in": game_ids}})
    print(f"Deleted {result.deleted_count} documents from comments")

    for collection_name in ["games", "goals"]:
        result = await db[collection_name].delete_many({"player_id": player_id})
        print(f"Deleted {result.deleted_count} documents from {collection_name}")

    client.close()
    print("Done!")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("Usage: python drop_player_data.py <mongodb_url> <player_id>")
        sys.exit(1)

    asyncio.run(drop_player_data(sys.argv[1], sys.argv[2]))
