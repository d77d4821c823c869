"""
Client repository implementation using SQLAlchemy.
"""

from typing import Optional, List
from sqlalchemy import func

from hourbook.domain.models.client import Client
from hourbook.domain.repositories.client_repository import ClientRepository as ClientRepositoryInterface
from hourbook.domain.models.base import DuplicateEntityError
from hourbook.infrastructure.db.models import ClientModel, ProjectModel, InvoiceModel
from hourbook.infrastructure.db.search import apply_search
from hourbook.infrastructure.mappers.client_mapper import ClientMapper
from hourbook.infrastructure.repositories.base import SQLAlchemyRepository


class SQLAlchemyClientRepository(SQLAlchemyRepository, ClientRepositoryInterface):
    """SQLAlchemy implementation of client repository."""

    model = ClientModel
    entity_type = "Client"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = ClientMapper()

    def save(self, client: Client, expected_version: Optional[int] = None) -> Client:
        """Save a client entity."""
        if not self.is_name_unique(client.owner_id, client.name, exclude_id=client.id):
            raise DuplicateEntityError("Client", "name", client.name)

        if client.is_new:
            model = self.mapper.domain_to_model(client)
            self.session.add(model)
        else:
            model = self._load_for_update(client.owner_id, client.id, expected_version)
            self.mapper.update_model(model, client)

        self._flush(client.owner_id, client.id, unique=("name", client.name))

        client.id = model.id
        client.version = model.version
        return client

    def get_by_id(self, owner_id: str, client_id: int) -> Optional[Client]:
        """Get an owned client by ID."""
        model = self._get_owned_model(owner_id, client_id)
        if not model:
            return None

        return self.mapper.model_to_domain(model, project_count=self._count_projects(client_id))

    def list(self, owner_id: str, search: Optional[str] = None, include_inactive: bool = False) -> List[Client]:
        """List clients with their project counts, ordered by name."""
        query = self.session.query(ClientModel, func.count(ProjectModel.id)).outerjoin(
            ProjectModel, ProjectModel.client_id == ClientModel.id
        ).filter(ClientModel.owner_id == owner_id)

        if not include_inactive:
            query = query.filter(ClientModel.is_active.is_(True))

        query = apply_search(
            query,
            [ClientModel.name, ClientModel.email, ClientModel.phone, ClientModel.address, ClientModel.notes],
            search,
        )

        rows = query.group_by(ClientModel.id).order_by(ClientModel.name).all()
        return [self.mapper.model_to_domain(model, project_count=count) for model, count in rows]

    def is_name_unique(self, owner_id: str, name: str, exclude_id: Optional[int] = None) -> bool:
        """Case-insensitive name check within the owner's clients."""
        query = self._owned_query(owner_id).filter(
            func.lower(ClientModel.name) == name.strip().lower()
        )
        if exclude_id is not None:
            query = query.filter(ClientModel.id != exclude_id)

        return not self.session.query(query.exists()).scalar()

    def has_dependents(self, owner_id: str, client_id: int) -> bool:
        """Whether any of the owner's projects or invoices reference the client."""
        has_projects = self.session.query(
            self.session.query(ProjectModel).filter(
                ProjectModel.owner_id == owner_id,
                ProjectModel.client_id == client_id,
            ).exists()
        ).scalar()
        if has_projects:
            return True

        return self.session.query(
            self.session.query(InvoiceModel).filter(
                InvoiceModel.owner_id == owner_id,
                InvoiceModel.client_id == client_id,
            ).exists()
        ).scalar()

    def _count_projects(self, client_id: int) -> int:
        return self.session.query(func.count(ProjectModel.id)).filter(
            ProjectModel.client_id == client_id
        ).scalar() or 0
