"""Tests for session token functions."""
import pytest
from datetime import timedelta
from jose import JWTError


class TestSessionTokens:
    """Tests for session token creation and verification."""

    def test_create_session_token_basic(self):
        """Test creating a session token."""
        from app.utils.session_token import create_session_token

        token = create_session_token(player_id="player123")

        assert isinstance(token, str)
        assert len(token) > 0

    def test_verify_session_token_valid(self):
        """Test verifying a valid token returns the player id."""
        from app.utils.session_token import create_session_token, verify_session_token

        token = create_session_token(player_id="player123")

        assert verify_session_token(token) == "player123"

    def test_verify_session_token_invalid(self):
        """Test verifying a malformed token."""
        from app.utils.session_token import verify_session_token

        with pytest.raises(JWTError):
            verify_session_token("invalid.token.here")

    def test_verify_session_token_expired(self):
        """Test verifying an expired token."""
        from app.utils.session_token import create_session_token, verify_session_token

        token = create_session_token(
            player_id="player123", expires_delta=timedelta(seconds=-1)
        )

        with pytest.raises(JWTError):
            verify_session_token(token)

    def test_token_payload(self):
        """Test that the token payload carries the player id and expiry."""
        from app.utils.session_token import create_session_token
        from jose import jwt
        from app.config import settings

        token = create_session_token(player_id="player123")
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )

        assert payload["sub"] == "player123"
        assert "exp" in payload

    def test_different_players_different_tokens(self):
        """Test that switching players changes the token."""
        from app.utils.session_token import create_session_token

        assert create_session_token("player1") != create_session_token("player2")
