"""
User profile mapper.
"""

from hourbook.domain.models.user import UserProfile
from hourbook.infrastructure.db.models import UserProfileModel


class UserMapper:
    """Maps between UserProfile and UserProfileModel."""

    def domain_to_model(self, profile: UserProfile) -> UserProfileModel:
        return UserProfileModel(
            id=profile.id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            company_name=profile.company_name,
            address=profile.address,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    def update_model(self, model: UserProfileModel, profile: UserProfile) -> None:
        model.first_name = profile.first_name
        model.last_name = profile.last_name
        model.company_name = profile.company_name
        model.address = profile.address
        model.updated_at = profile.updated_at

    def model_to_domain(self, model: UserProfileModel) -> UserProfile:
        return UserProfile(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            company_name=model.company_name,
            address=model.address,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
