"""
Time entry repository interface.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Sequence

from hourbook.domain.models.time_entry import TimeEntry


class TimeEntryRepository(ABC):
    """Repository interface for TimeEntry aggregate."""

    @abstractmethod
    def save(self, entry: TimeEntry, expected_version: Optional[int] = None) -> TimeEntry:
        """Insert or update a time entry."""
        pass

    @abstractmethod
    def get_by_id(self, owner_id: str, entry_id: int) -> Optional[TimeEntry]:
        """Find an owned time entry by id, or None."""
        pass

    @abstractmethod
    def get_many(self, owner_id: str, entry_ids: Sequence[int]) -> List[TimeEntry]:
        """Owned time entries among the given ids."""
        pass

    @abstractmethod
    def list(self, owner_id: str, search: Optional[str] = None) -> List[TimeEntry]:
        """List the owner's time entries, latest start first."""
        pass

    @abstractmethod
    def find_unbilled(
        self,
        owner_id: str,
        client_id: int,
        start_date: date,
        end_date: date,
        project_id: Optional[int] = None,
    ) -> List[TimeEntry]:
        """
        Unbilled entries for a client whose start falls on a calendar day
        within [start_date, end_date].
        """
        pass

    @abstractmethod
    def is_invoiced(self, owner_id: str, entry_id: int) -> bool:
        """Whether the entry is linked to any invoice."""
        pass

    @abstractmethod
    def delete(self, owner_id: str, entry_id: int) -> bool:
        """Hard-delete an owned time entry."""
        pass
