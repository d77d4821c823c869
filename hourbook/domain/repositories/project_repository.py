"""
Project repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hourbook.domain.models.project import Project


class ProjectRepository(ABC):
    """Repository interface for Project aggregate."""

    @abstractmethod
    def save(self, project: Project, expected_version: Optional[int] = None) -> Project:
        """Insert or update a project."""
        pass

    @abstractmethod
    def get_by_id(self, owner_id: str, project_id: int) -> Optional[Project]:
        """Find an owned project by id, or None."""
        pass

    @abstractmethod
    def list(self, owner_id: str, search: Optional[str] = None) -> List[Project]:
        """List the owner's projects, ordered by title."""
        pass

    @abstractmethod
    def has_time_entries(self, owner_id: str, project_id: int) -> bool:
        """Whether any time entry references the project."""
        pass

    @abstractmethod
    def delete(self, owner_id: str, project_id: int) -> bool:
        """Hard-delete an owned project."""
        pass
