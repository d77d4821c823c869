"""
Authentication dependencies for FastAPI.
"""

from typing import Annotated
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from hourbook.infrastructure.auth.jwt_handler import JWTHandler
from hourbook.infrastructure.db.database import get_db
from hourbook.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from hourbook.domain.models.base import ValidationError


# Security scheme
security = HTTPBearer()

# Global instance
jwt_handler = JWTHandler()


def get_jwt_handler() -> JWTHandler:
    """Dependency to get JWT handler."""
    return jwt_handler


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> str:
    """
    FastAPI dependency to get current authenticated user ID.

    Raises:
        HTTPException: If authentication fails
    """
    try:
        return jwt_handler.get_user_id(credentials.credentials)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_owner(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> str:
    """
    Current user ID, with a profile row guaranteed to exist.
    Every owned row references the profile, so it is provisioned on first use.
    """
    SQLAlchemyUserRepository(db).get_or_create(user_id)
    return user_id
