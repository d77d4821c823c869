"""
Project repository implementation using SQLAlchemy.
"""

from typing import Optional, List
from sqlalchemy.orm import contains_eager, joinedload

from hourbook.domain.models.project import Project
from hourbook.domain.repositories.project_repository import ProjectRepository as ProjectRepositoryInterface
from hourbook.domain.models.base import DuplicateEntityError
from hourbook.infrastructure.db.models import ProjectModel, ClientModel, TimeEntryModel
from hourbook.infrastructure.db.search import apply_search
from hourbook.infrastructure.mappers.project_mapper import ProjectMapper
from hourbook.infrastructure.repositories.base import SQLAlchemyRepository


class SQLAlchemyProjectRepository(SQLAlchemyRepository, ProjectRepositoryInterface):
    """SQLAlchemy implementation of project repository."""

    model = ProjectModel
    entity_type = "Project"

    def __init__(self, session):
        super().__init__(session)
        self.mapper = ProjectMapper()

    def save(self, project: Project, expected_version: Optional[int] = None) -> Project:
        """Save a project entity."""
        duplicate = self._owned_query(project.owner_id).filter(ProjectModel.title == project.title)
        if project.id is not None:
            duplicate = duplicate.filter(ProjectModel.id != project.id)
        if self.session.query(duplicate.exists()).scalar():
            raise DuplicateEntityError("Project", "title", project.title)

        if project.is_new:
            model = self.mapper.domain_to_model(project)
            self.session.add(model)
        else:
            model = self._load_for_update(project.owner_id, project.id, expected_version)
            self.mapper.update_model(model, project)

        self._flush(project.owner_id, project.id, unique=("title", project.title))

        project.id = model.id
        project.version = model.version
        return project

    def get_by_id(self, owner_id: str, project_id: int) -> Optional[Project]:
        """Get an owned project by ID."""
        model = self._owned_query(owner_id).options(
            joinedload(ProjectModel.client)
        ).filter(ProjectModel.id == project_id).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def list(self, owner_id: str, search: Optional[str] = None) -> List[Project]:
        """List projects with their client, ordered by title."""
        query = self.session.query(ProjectModel).join(ProjectModel.client).options(
            contains_eager(ProjectModel.client)
        ).filter(ProjectModel.owner_id == owner_id)

        query = apply_search(
            query,
            [ProjectModel.title, ProjectModel.description, ClientModel.name],
            search,
        )

        models = query.order_by(ProjectModel.title).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def has_time_entries(self, owner_id: str, project_id: int) -> bool:
        """Whether any time entry references the project."""
        return self.session.query(
            self.session.query(TimeEntryModel).filter(
                TimeEntryModel.owner_id == owner_id,
                TimeEntryModel.project_id == project_id,
            ).exists()
        ).scalar()
