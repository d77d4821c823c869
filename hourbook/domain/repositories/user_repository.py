"""
User profile repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hourbook.domain.models.user import UserProfile


class UserRepository(ABC):
    """Repository interface for user profiles."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Find a profile by the principal's id."""
        pass

    @abstractmethod
    def get_or_create(self, user_id: str) -> UserProfile:
        """Return the profile, creating a default one on first sight of the principal."""
        pass

    @abstractmethod
    def save(self, profile: UserProfile) -> UserProfile:
        """Insert or update a profile."""
        pass
