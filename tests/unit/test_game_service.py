"""Tests for GameService."""
import pytest
from datetime import date, datetime
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from conftest import PLAYER_ID, game_doc, make_collection, make_db


def game_create(**overrides):
    from app.models.game import GameCreate

    data = {
        "date": "2024-03-01",
        "opponent": "Red Lions FC",
        "location": "Home",
        "result": "Win",
        "position": "Forward",
        "duration": 90,
        "goals": 2,
        "assists": 1,
        "passes": 34,
    }
    data.update(overrides)
    return GameCreate(**data)


@pytest.mark.asyncio
class TestGameServiceCreate:
    """Tests for logging games."""

    async def test_create_game_success(self):
        """Test a logged game is owned by the player."""
        from app.services.game_service import GameService

        games = make_collection()
        service = GameService(make_db(games=games))

        game = await service.create_game(PLAYER_ID, game_create())

        assert game.player_id == PLAYER_ID
        assert game.opponent == "Red Lions FC"
        assert game.date == date(2024, 3, 1)
        assert game.completed is True
        assert game.played_full_match is True

        inserted = games.insert_one.call_args[0][0]
        assert inserted["date"] == datetime(2024, 3, 1)
        assert inserted["result"] == "Win"
        assert inserted["location"] == "Home"


@pytest.mark.asyncio
class TestGameServiceList:
    """Tests for listing games."""

    async def test_list_games_scoped_to_player(self):
        """Test listing queries by player."""
        from app.services.game_service import GameService

        games = make_collection([game_doc(), game_doc()])
        service = GameService(make_db(games=games))

        result = await service.list_games(PLAYER_ID)

        assert len(result) == 2
        assert games.find.call_args[0][0] == {"player_id": PLAYER_ID}

    async def test_missing_counters_read_as_zero(self):
        """Test documents without counters still load."""
        from app.services.game_service import GameService

        doc = game_doc()
        del doc["goals"], doc["assists"], doc["passes"]
        service = GameService(make_db(games=make_collection([doc])))

        [game] = await service.list_games(PLAYER_ID)

        assert (game.goals, game.assists, game.passes) == (0, 0, 0)

    async def test_history_sorted_and_filtered(self):
        """Test match history ordering and result filter."""
        from app.services.game_service import GameService
        from app.models.game import Result

        docs = [
            game_doc(date="2024-01-01", result="Win", opponent="A"),
            game_doc(date=" 2024-02-01 ", result="Loss", opponent="B"),
            game_doc(date=datetime(2024, 3, 1), result="Win", opponent="C"),
        ]
        service = GameService(make_db(games=make_collection(docs)))

        history = await service.list_history(PLAYER_ID)
        wins = await service.list_history(PLAYER_ID, result=Result.WIN)

        assert [g.opponent for g in history] == ["C", "B", "A"]
        assert [g.opponent for g in wins] == ["C", "A"]


@pytest.mark.asyncio
class TestGameServiceGet:
    """Tests for getting a single game."""

    async def test_get_game_not_found(self):
        """Test a missing game raises NotFoundError."""
        from app.services.game_service import GameService
        from app.errors import NotFoundError

        service = GameService(make_db())

        with pytest.raises(NotFoundError, match="Game not found"):
            await service.get_game(PLAYER_ID, str(ObjectId()))

    async def test_get_game_invalid_id(self):
        """Test a malformed id is reported as not found."""
        from app.services.game_service import GameService
        from app.errors import NotFoundError

        service = GameService(make_db())

        with pytest.raises(NotFoundError):
            await service.get_game(PLAYER_ID, "bogus")


@pytest.mark.asyncio
class TestGameServiceUpdate:
    """Tests for editing games."""

    async def test_replace_game(self):
        """Test a full replace sets every editable field."""
        from app.services.game_service import GameService

        existing = game_doc()
        games = make_collection()
        games.find_one_and_update.return_value = {**existing, "opponent": "Blue Hawks"}
        service = GameService(make_db(games=games))

        game = await service.replace_game(
            PLAYER_ID, str(existing["_id"]), game_create(opponent="Blue Hawks")
        )

        assert game.opponent == "Blue Hawks"
        update = games.find_one_and_update.call_args[0][1]["$set"]
        assert {"date", "opponent", "location", "result", "duration", "notes"} <= set(update)

    async def test_patch_game_sends_only_given_fields(self):
        """Test a patch only sets the provided fields."""
        from app.services.game_service import GameService
        from app.models.game import GameUpdate

        existing = game_doc()
        games = make_collection()
        games.find_one_and_update.return_value = {**existing, "goals": 3}
        service = GameService(make_db(games=games))

        game = await service.update_game(
            PLAYER_ID, str(existing["_id"]), GameUpdate(goals=3)
        )

        assert game.goals == 3
        update = games.find_one_and_update.call_args[0][1]["$set"]
        assert set(update) == {"goals", "updated_at"}

    async def test_update_missing_game(self):
        """Test editing a missing game raises NotFoundError."""
        from app.services.game_service import GameService
        from app.models.game import GameUpdate
        from app.errors import NotFoundError

        service = GameService(make_db())

        with pytest.raises(NotFoundError):
            await service.update_game(PLAYER_ID, str(ObjectId()), GameUpdate(goals=1))


@pytest.mark.asyncio
class TestGameServiceDelete:
    """Tests for deleting games."""

    async def test_delete_game_removes_comments(self):
        """Test deleting a game deletes its comments."""
        from app.services.game_service import GameService

        game_id = str(ObjectId())
        comments = make_collection()
        comments.delete_many.return_value = MagicMock(deleted_count=2)
        service = GameService(make_db(comments=comments))

        result = await service.delete_game(PLAYER_ID, game_id)

        assert result == {"deleted_count": 1, "deleted_comments": 2}
        comments.delete_many.assert_awaited_once_with({"game_id": game_id})

    async def test_delete_game_not_found(self):
        """Test deleting a missing game leaves comments alone."""
        from app.services.game_service import GameService
        from app.errors import NotFoundError

        games = make_collection()
        games.delete_one.return_value = MagicMock(deleted_count=0)
        comments = make_collection()
        service = GameService(make_db(games=games, comments=comments))

        with pytest.raises(NotFoundError):
            await service.delete_game(PLAYER_ID, str(ObjectId()))

        comments.delete_many.assert_not_called()
