"""
Client management router.
Handles CRUD operations for client resources.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, status, Query

from hourbook.infrastructure.auth import get_current_owner
from hourbook.infrastructure.repositories import SQLAlchemyClientRepository, SQLAlchemyUnitOfWork
from hourbook.infrastructure.web.dependencies import get_client_repository, get_unit_of_work, unwrap
from hourbook.application.use_cases.client_use_cases import (
    CreateClientUseCase,
    UpdateClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
    DeleteClientUseCase,
    DeactivateClientUseCase,
    ReactivateClientUseCase,
    CheckClientNameUseCase,
)
from hourbook.application.dto.client_dto import (
    CreateClientRequestDTO,
    UpdateClientRequestDTO,
    ListClientsRequestDTO,
    ClientNameCheckRequestDTO,
    ClientResponseDTO,
    ClientDeleteResponseDTO,
    ClientNameAvailabilityResponseDTO,
)


router = APIRouter()

OwnerId = Annotated[str, Depends(get_current_owner)]
ClientRepo = Annotated[SQLAlchemyClientRepository, Depends(get_client_repository)]
UnitOfWorkDep = Annotated[SQLAlchemyUnitOfWork, Depends(get_unit_of_work)]


@router.get("", response_model=List[ClientResponseDTO])
async def list_clients(
    user_id: OwnerId,
    repository: ClientRepo,
    search: Optional[str] = Query(None, max_length=200, description="Search name, email, phone, address and notes; * is a wildcard"),
    include_inactive: bool = Query(False, description="Include deactivated clients"),
):
    """
    List clients ordered by name.

    - **search**: Optional search term, `*` matches any run of characters
    - **include_inactive**: Also return deactivated clients
    """
    request = ListClientsRequestDTO(search=search, include_inactive=include_inactive)
    use_case = ListClientsUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.get("/name-available", response_model=ClientNameAvailabilityResponseDTO)
async def check_client_name(
    user_id: OwnerId,
    repository: ClientRepo,
    name: str = Query(..., min_length=1, max_length=200),
    exclude_id: Optional[int] = Query(None, gt=0, description="Client being edited"),
):
    """Check whether a client name is still free for the current user."""
    request = ClientNameCheckRequestDTO(name=name, exclude_id=exclude_id)
    use_case = CheckClientNameUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.get("/{client_id}", response_model=ClientResponseDTO)
async def get_client(client_id: int, user_id: OwnerId, repository: ClientRepo):
    """Get a client by ID."""
    use_case = GetClientUseCase(repository).set_current_user(user_id)
    return unwrap(await use_case.execute(client_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientResponseDTO)
async def create_client(
    request: CreateClientRequestDTO,
    user_id: OwnerId,
    repository: ClientRepo,
    unit_of_work: UnitOfWorkDep,
):
    """
    Create a new client.

    - **name**: Client name, unique per user (required)
    - **email**, **phone**, **address**, **notes**: Optional contact details
    """
    use_case = CreateClientUseCase(repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.put("/{client_id}", response_model=ClientResponseDTO)
async def update_client(
    client_id: int,
    request: UpdateClientRequestDTO,
    user_id: OwnerId,
    repository: ClientRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Update a client. Send the last read `version` to detect concurrent edits."""
    request.id = client_id
    use_case = UpdateClientUseCase(repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(request))


@router.delete("/{client_id}", response_model=ClientDeleteResponseDTO)
async def delete_client(
    client_id: int,
    user_id: OwnerId,
    repository: ClientRepo,
    unit_of_work: UnitOfWorkDep,
):
    """
    Delete a client.

    Clients with projects or invoices are deactivated instead; the
    `outcome` field tells which happened.
    """
    use_case = DeleteClientUseCase(repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(client_id))


@router.post("/{client_id}/deactivate", response_model=ClientResponseDTO)
async def deactivate_client(
    client_id: int,
    user_id: OwnerId,
    repository: ClientRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Deactivate a client without deleting it."""
    use_case = DeactivateClientUseCase(repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(client_id))


@router.post("/{client_id}/reactivate", response_model=ClientResponseDTO)
async def reactivate_client(
    client_id: int,
    user_id: OwnerId,
    repository: ClientRepo,
    unit_of_work: UnitOfWorkDep,
):
    """Reactivate a deactivated client."""
    use_case = ReactivateClientUseCase(repository, unit_of_work).set_current_user(user_id)
    return unwrap(await use_case.execute(client_id))
