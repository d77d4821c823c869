"""
Client mapper for converting between domain entities and database models.
"""

from typing import Optional

from hourbook.domain.models.client import Client
from hourbook.infrastructure.db.models import ClientModel


class ClientMapper:
    """Maps between Client domain entity and ClientModel database model."""

    def domain_to_model(self, client: Client) -> ClientModel:
        """Convert a new Client domain entity to ClientModel."""
        return ClientModel(
            id=client.id,
            owner_id=client.owner_id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            notes=client.notes,
            is_active=client.is_active,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )

    def update_model(self, model: ClientModel, client: Client) -> None:
        """Copy editable fields onto a loaded model. The version column is left to the ORM."""
        model.name = client.name
        model.email = client.email
        model.phone = client.phone
        model.address = client.address
        model.notes = client.notes
        model.is_active = client.is_active
        model.updated_at = client.updated_at

    def model_to_domain(self, model: ClientModel, project_count: Optional[int] = None) -> Client:
        """Convert ClientModel to Client domain entity."""
        return Client(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            address=model.address,
            notes=model.notes,
            is_active=model.is_active,
            project_count=project_count or 0,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
