"""Player router - API endpoints for player profiles."""
from fastapi import APIRouter, Depends, HTTPException, status

from app.database import get_database
from app.errors import NotFoundError
from app.models.player import Player, PlayerCreate
from app.services.player_service import PlayerService


router = APIRouter(prefix="/players", tags=["players"])


@router.post("", response_model=Player, status_code=status.HTTP_201_CREATED)
async def create_player(player: PlayerCreate, db=Depends(get_database)):
    """
    Create a player profile.

    - Joined date defaults to today
    - Profiles cannot be edited or deleted afterwards
    """
    service = PlayerService(db)
    return await service.create_player(player)


@router.get("", response_model=list[Player])
async def list_players(db=Depends(get_database)):
    """List all player profiles."""
    service = PlayerService(db)
    return await service.list_players()


@router.get("/{player_id}", response_model=Player)
async def get_player(player_id: str, db=Depends(get_database)):
    """Get a single player profile."""
    service = PlayerService(db)
    try:
        return await service.get_player(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
