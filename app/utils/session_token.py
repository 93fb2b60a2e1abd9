"""Session token utilities: the current player travels as a signed JWT."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from app.config import settings


def create_session_token(
    player_id: str, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a session token selecting a player.

    Args:
        player_id: Player ID to encode in token
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_session_token(player_id="player123")
        >>> isinstance(token, str)
        True
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.session_expiration_minutes)

    to_encode = {
        "sub": player_id,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }

    return jwt.encode(
        to_encode, settings.session_secret, algorithm=settings.session_algorithm
    )


def verify_session_token(token: str) -> str:
    """
    Verify and decode a session token.

    Args:
        token: JWT token string to verify

    Returns:
        Player ID from token

    Raises:
        JWTError: If token is invalid or expired

    Example:
        >>> token = create_session_token(player_id="player123")
        >>> verify_session_token(token)
        'player123'
    """
    payload = jwt.decode(
        token, settings.session_secret, algorithms=[settings.session_algorithm]
    )
    player_id: str = payload.get("sub")

    if player_id is None:
        raise JWTError("Token payload missing 'sub' claim")

    return player_id
