"""
Dashboard query interface.
"""

from abc import ABC, abstractmethod

from hourbook.domain.models.dashboard import DashboardSummary


class DashboardRepository(ABC):
    """Read-only aggregate queries for the dashboard."""

    @abstractmethod
    def get_summary(self, owner_id: str) -> DashboardSummary:
        """Compute the owner's dashboard rollup."""
        pass
