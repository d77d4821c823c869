"""
Project mapper for converting between domain entities and database models.
"""

from decimal import Decimal

from hourbook.domain.models.project import Project
from hourbook.infrastructure.db.models import ProjectModel


class ProjectMapper:
    """Maps between Project domain entity and ProjectModel database model."""

    def domain_to_model(self, project: Project) -> ProjectModel:
        """Convert a new Project domain entity to ProjectModel."""
        return ProjectModel(
            id=project.id,
            owner_id=project.owner_id,
            client_id=project.client_id,
            title=project.title,
            description=project.description,
            hourly_rate=project.hourly_rate,
            status=project.status,
            start_date=project.start_date,
            end_date=project.end_date,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )

    def update_model(self, model: ProjectModel, project: Project) -> None:
        """Copy editable fields onto a loaded model."""
        model.client_id = project.client_id
        model.title = project.title
        model.description = project.description
        model.hourly_rate = project.hourly_rate
        model.status = project.status
        model.start_date = project.start_date
        model.end_date = project.end_date
        model.updated_at = project.updated_at

    def model_to_domain(self, model: ProjectModel) -> Project:
        """Convert ProjectModel to Project domain entity."""
        return Project(
            id=model.id,
            owner_id=model.owner_id,
            client_id=model.client_id,
            title=model.title,
            description=model.description,
            hourly_rate=Decimal(str(model.hourly_rate or 0)),
            status=model.status,
            start_date=model.start_date,
            end_date=model.end_date,
            client_name=model.client.name if model.client else None,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
