"""
JWT token handler.
Validates bearer tokens and extracts the acting principal.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta
from jose import JWTError, jwt

from hourbook.config import Settings, get_settings
from hourbook.domain.models.base import ValidationError


class JWTHandler:
    """Handles JWT token validation and user extraction."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.jwt_secret = self.settings.jwt_secret_key
        self.jwt_algorithm = self.settings.jwt_algorithm

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string, with or without the ``Bearer`` prefix

        Returns:
            Dict containing token payload

        Raises:
            ValidationError: If token is invalid or expired
        """
        if token.startswith("Bearer "):
            token = token[7:]

        try:
            payload = jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False},
            )
        except JWTError as e:
            raise ValidationError(f"Invalid JWT token: {str(e)}")

        if not payload.get("sub"):
            raise ValidationError("Token missing user ID (sub claim)")

        if "exp" not in payload:
            raise ValidationError("Token missing expiration (exp claim)")

        return payload

    def get_user_id(self, token: str) -> str:
        """
        Extract user ID from JWT token.

        Raises:
            ValidationError: If token is invalid
        """
        return str(self.verify_token(token)["sub"])

    def is_token_valid(self, token: str) -> bool:
        """Check if token is valid without raising exceptions."""
        try:
            self.verify_token(token)
            return True
        except ValidationError:
            return False

    def create_access_token(self, user_id: str, email: Optional[str] = None, expires_minutes: Optional[int] = None) -> str:
        """
        Issue a signed access token for a user.

        Args:
            user_id: User ID placed in the ``sub`` claim
            email: Optional email claim
            expires_minutes: Lifetime, defaults to the configured expiry

        Returns:
            JWT token string
        """
        if expires_minutes is None:
            expires_minutes = self.settings.jwt_access_token_expire_minutes

        now = datetime.utcnow()
        payload = {
            "sub": user_id,
            "iat": int((now - datetime(1970, 1, 1)).total_seconds()),
            "exp": int((now + timedelta(minutes=expires_minutes) - datetime(1970, 1, 1)).total_seconds()),
            "iss": "hourbook",
        }
        if email:
            payload["email"] = email

        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def generate_test_token(self, user_id: str, email: str = "test@example.com", expires_minutes: int = 60) -> str:
        """Generate a token for development and tests."""
        return self.create_access_token(user_id, email=email, expires_minutes=expires_minutes)
