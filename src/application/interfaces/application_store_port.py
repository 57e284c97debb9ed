"""
Application Store Port - Abstract interface over the hosted application store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Application
from src.domain.value_objects import ApplicationStatus


class ApplicationStorePort(ABC):
    """Abstract interface for reading and saving job applications."""

    @abstractmethod
    async def get_application(self, application_id: str) -> Optional[Application]:
        """Get an application by id."""
        pass

    @abstractmethod
    async def get_applications_by_applicant(
        self,
        applicant_id: str,
        statuses: Optional[list[ApplicationStatus]] = None,
    ) -> list[Application]:
        """Get an applicant's applications, newest ``applied_at`` first."""
        pass

    @abstractmethod
    async def save_application(self, application: Application) -> None:
        """Persist an application record."""
        pass
