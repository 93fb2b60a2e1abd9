"""Session router - current player selection."""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.database import get_database
from app.errors import NotFoundError
from app.models.player import Player
from app.models.session import SessionSelect, SessionToken
from app.services.player_service import PlayerService
from app.services.session_service import SessionService
from app.utils.session_token import verify_session_token


router = APIRouter(prefix="/session", tags=["session"])
security = HTTPBearer(auto_error=False)


async def get_current_player_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """
    Dependency to get the current player ID from the session token.

    Args:
        credentials: HTTP bearer credentials

    Returns:
        Player ID from token

    Raises:
        HTTPException: If no player is selected or the token is invalid (401)
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No player selected",
        )

    try:
        return verify_session_token(credentials.credentials)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid session token",
        )


@router.post("", response_model=SessionToken)
async def switch_player(selection: SessionSelect, db=Depends(get_database)):
    """
    Switch the current player.

    - Persists the choice as the fallback for the next session
    - Returns 404 if the player does not exist
    """
    service = SessionService(db)
    try:
        return await service.switch_player(selection.player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/resume", response_model=SessionToken)
async def resume_session(db=Depends(get_database)):
    """
    Resolve the current player at session start.

    - Last selected player if it still exists, else the first profile
    - Returns 404 if no profiles exist yet
    """
    service = SessionService(db)
    try:
        return await service.resume()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=Player)
async def get_current_player(
    player_id: str = Depends(get_current_player_id),
    db=Depends(get_database),
):
    """Get the current player."""
    service = PlayerService(db)
    try:
        return await service.get_player(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
