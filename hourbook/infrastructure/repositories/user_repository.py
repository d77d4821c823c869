"""
User repository implementation using SQLAlchemy.
"""

import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hourbook.domain.models.user import UserProfile
from hourbook.domain.repositories.user_repository import UserRepository as UserRepositoryInterface
from hourbook.infrastructure.db.models import UserProfileModel
from hourbook.infrastructure.mappers.user_mapper import UserMapper


logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = UserMapper()

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get user profile by ID."""
        model = self.session.get(UserProfileModel, user_id)
        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def get_or_create(self, user_id: str) -> UserProfile:
        """Return the profile, provisioning a default one for a first-time principal."""
        profile = self.get_by_id(user_id)
        if profile:
            return profile

        self.session.add(self.mapper.domain_to_model(UserProfile(id=user_id)))
        try:
            self.session.commit()
            logger.info(f"Provisioned profile for user {user_id}")
        except IntegrityError:
            # Another request provisioned it first
            self.session.rollback()

        return self.get_by_id(user_id)

    def save(self, profile: UserProfile) -> UserProfile:
        """Save a user profile."""
        model = self.session.get(UserProfileModel, profile.id)
        if model is None:
            model = self.mapper.domain_to_model(profile)
            self.session.add(model)
        else:
            self.mapper.update_model(model, profile)

        self.session.flush()
        profile.version = model.version
        return profile
