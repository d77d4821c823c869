"""
Client repository interface.
Defines the contract for client data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from hourbook.domain.models.client import Client


class ClientRepository(ABC):
    """
    Repository interface for Client aggregate.
    Every operation is scoped to the owning user.
    """

    @abstractmethod
    def save(self, client: Client, expected_version: Optional[int] = None) -> Client:
        """
        Insert or update a client.
        Raises DuplicateEntityError on a name clash and ConcurrencyConflictError
        when expected_version no longer matches the stored row.
        """
        pass

    @abstractmethod
    def get_by_id(self, owner_id: str, client_id: int) -> Optional[Client]:
        """Find an owned client by id, or None."""
        pass

    @abstractmethod
    def list(self, owner_id: str, search: Optional[str] = None, include_inactive: bool = False) -> List[Client]:
        """List the owner's clients ordered by name."""
        pass

    @abstractmethod
    def is_name_unique(self, owner_id: str, name: str, exclude_id: Optional[int] = None) -> bool:
        """Case-insensitive uniqueness check of a client name."""
        pass

    @abstractmethod
    def has_dependents(self, owner_id: str, client_id: int) -> bool:
        """Whether any project or invoice references the client."""
        pass

    @abstractmethod
    def delete(self, owner_id: str, client_id: int) -> bool:
        """Hard-delete an owned client. Returns False when it does not exist."""
        pass
