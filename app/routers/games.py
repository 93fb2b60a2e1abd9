"""Game router - API endpoints for logged matches and their comments."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from app.database import get_database
from app.errors import FieldValidationError, NotFoundError
from app.models.comment import Comment, CommentCreate, CommentThread
from app.models.game import Game, GameCreate, GameUpdate, Result
from app.routers.session import get_current_player_id
from app.services.comment_service import CommentService
from app.services.game_service import GameService


router = APIRouter(prefix="/games", tags=["games"])


@router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
async def create_game(
    game: GameCreate,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """
    Log a match for the current player.

    - Requires a selected player
    - Duration must be positive; counters must not be negative
    """
    service = GameService(db)
    return await service.create_game(player_id=player_id, game_create=game)


@router.get("", response_model=list[Game])
async def list_games(
    result: Optional[Result] = Query(None, description="Filter by result (Win, Draw, Loss)"),
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """
    Match history for the current player, most recent first.

    - Optional filter: result
    """
    service = GameService(db)
    return await service.list_history(player_id=player_id, result=result)


@router.get("/{game_id}", response_model=Game)
async def get_game(
    game_id: str,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """
    Get a single match.

    - Returns 404 if the match does not exist for the current player
    """
    service = GameService(db)
    try:
        return await service.get_game(player_id=player_id, game_id=game_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{game_id}", response_model=Game)
async def replace_game(
    game_id: str,
    game: GameCreate,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """Replace every editable field of a match."""
    service = GameService(db)
    try:
        return await service.replace_game(
            player_id=player_id,
            game_id=game_id,
            game_create=game,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{game_id}", response_model=Game)
async def update_game(
    game_id: str,
    game_update: GameUpdate,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """Update the provided fields of a match."""
    service = GameService(db)
    try:
        return await service.update_game(
            player_id=player_id,
            game_id=game_id,
            game_update=game_update,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{game_id}")
async def delete_game(
    game_id: str,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """
    Delete a match.

    - Its comments are deleted with it
    - Returns 404 if the match does not exist
    """
    service = GameService(db)
    try:
        return await service.delete_game(player_id=player_id, game_id=game_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{game_id}/comments", response_model=list[Comment])
async def list_comments(game_id: str, db=Depends(get_database)):
    """
    List comments on a match, most recent first.

    - Returns 404 if the match does not exist
    """
    service = CommentService(db)
    try:
        return await service.list_comments(game_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "/{game_id}/comments",
    response_model=CommentThread,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    game_id: str,
    comment: CommentCreate,
    db=Depends(get_database),
):
    """
    Comment on a match.

    - Author and body are required (after trimming)
    - Returns the updated thread with the new comment first
    """
    service = CommentService(db)
    try:
        return await service.post_comment(game_id, comment)
    except FieldValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": e.errors},
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
