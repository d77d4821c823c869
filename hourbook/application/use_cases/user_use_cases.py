"""
User profile use cases for the application layer.
"""

from hourbook.application.use_cases.base_use_case import (
    QueryUseCase, UpdateUseCase, AuthorizedUseCase,
)
from hourbook.application.dto.user_dto import UpdateUserProfileRequestDTO, UserProfileResponseDTO
from hourbook.domain.repositories.unit_of_work import UnitOfWork
from hourbook.domain.repositories.user_repository import UserRepository


class GetUserProfileUseCase(AuthorizedUseCase, QueryUseCase[None, UserProfileResponseDTO]):
    """Return the current user's profile, provisioning a default one on first use."""

    def __init__(self, user_repository: UserRepository):
        super().__init__()
        self.user_repository = user_repository

    async def _execute_business_logic(self, request: None) -> UserProfileResponseDTO:
        profile = self.user_repository.get_or_create(self.current_user_id)
        return UserProfileResponseDTO.from_domain(profile)


class UpdateUserProfileUseCase(AuthorizedUseCase, UpdateUseCase[UpdateUserProfileRequestDTO, UserProfileResponseDTO]):
    """Update the current user's name, company and address."""

    def __init__(self, user_repository: UserRepository, unit_of_work: UnitOfWork):
        super().__init__()
        self.user_repository = user_repository
        self.unit_of_work = unit_of_work

    async def _execute_command_logic(self, request: UpdateUserProfileRequestDTO) -> UserProfileResponseDTO:
        profile = self.user_repository.get_or_create(self.current_user_id)

        profile.update_profile(
            first_name=request.first_name,
            last_name=request.last_name,
            company_name=request.company_name,
            address=request.address,
        )

        return UserProfileResponseDTO.from_domain(self.user_repository.save(profile))
