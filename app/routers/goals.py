"""Goal router - API endpoints for season objectives."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from app.database import get_database
from app.errors import FieldValidationError, NotFoundError
from app.models.goal import Goal, GoalCreate, GoalProgress, GoalState, GoalTransitionResult
from app.routers.session import get_current_player_id
from app.services.goal_service import GoalService


router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("", response_model=Goal, status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal: GoalCreate,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """
    Create a new objective.

    - Requires a selected player
    - Starts active with no progress
    """
    service = GoalService(db)
    return await service.create_goal(player_id=player_id, goal_create=goal)


@router.get("", response_model=list[Goal])
async def list_goals(
    state: Optional[GoalState] = Query(None, description="Filter by state (active, completed)"),
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """
    List objectives for the current player.

    - Optional filter: state
    """
    service = GoalService(db)
    return await service.list_goals(player_id=player_id, state=state)


@router.post("/{goal_id}/progress", response_model=GoalTransitionResult)
async def update_progress(
    goal_id: str,
    progress: GoalProgress,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """
    Move an objective's progress by a signed delta.

    - Reaching the target completes it (event: target_reached)
    - Falling below the target reopens it (event: reopened)
    - Returns 422 if progress would go below zero
    """
    service = GoalService(db)
    try:
        return await service.update_progress(
            player_id=player_id,
            goal_id=goal_id,
            delta=progress.delta,
        )
    except FieldValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": e.errors},
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{goal_id}/toggle", response_model=GoalTransitionResult)
async def toggle_goal(
    goal_id: str,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """Mark an objective complete early, or reopen it."""
    service = GoalService(db)
    try:
        return await service.toggle_complete(player_id=player_id, goal_id=goal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{goal_id}")
async def delete_goal(
    goal_id: str,
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """
    Delete an objective.

    - Returns 404 if objective not found
    """
    service = GoalService(db)
    try:
        return await service.delete_goal(player_id=player_id, goal_id=goal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
