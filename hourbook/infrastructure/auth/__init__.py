"""
Authentication infrastructure module.
Handles JWT validation and the current-user dependencies.
"""

from .jwt_handler import JWTHandler
from .dependencies import get_current_user_id, get_current_owner, get_jwt_handler

__all__ = [
    "JWTHandler",
    "get_current_user_id",
    "get_current_owner",
    "get_jwt_handler",
]
