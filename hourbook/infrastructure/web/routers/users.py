"""
User profile router.
"""

from typing import Annotated
from fastapi import APIRouter, Depends

from hourbook.infrastructure.auth import get_current_owner
from hourbook.infrastructure.repositories import SQLAlchemyUserRepository, SQLAlchemyUnitOfWork
from hourbook.infrastructure.web.dependencies import get_user_repository, get_unit_of_work, unwrap
from hourbook.application.use_cases.user_use_cases import GetUserProfileUseCase, UpdateUserProfileUseCase
from hourbook.application.dto.user_dto import UpdateUserProfileRequestDTO, UserProfileResponseDTO


router = APIRouter()

OwnerId = Annotated[str, Depends(get_current_owner)]
UserRepo = Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]


@router.get("/me", response_model=UserProfileResponseDTO)
async def get_my_profile(user_id: OwnerId, repository: UserRepo):
    """Get the current user's profile."""
    use_case = GetUserProfileUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(None))


@router.put("/me", response_model=UserProfileResponseDTO)
async def update_my_profile(
    request: UpdateUserProfileRequestDTO,
    user_id: OwnerId,
    repository: UserRepo,
    unit_of_work: Annotated[SQLAlchemyUnitOfWork, Depends(get_unit_of_work)],
):
    """Update the current user's name, company and address."""
    use_case = UpdateUserProfileUseCase(repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(request))
