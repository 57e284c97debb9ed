"""
Track Application Use Case - Timeline view of a job seeker's applications.

Loads application records from the store and pairs each one with its
timeline, status messaging, suggestions and time estimates.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.application.interfaces import ApplicationStorePort
from src.domain.entities import Application
from src.domain.errors import ApplicationNotFoundError
from src.domain.services.timeline_service import TimelineService
from src.domain.value_objects import (
    ApplicationStatus,
    StatusMessage,
    TimeEstimate,
    TimelineConfig,
    TimelineDuration,
)


logger = logging.getLogger(__name__)


@dataclass
class ApplicationTracking:
    """Everything the applications page shows for one application."""
    application: Application
    timeline: TimelineConfig
    status_message: StatusMessage
    estimate: TimeEstimate
    duration: TimelineDuration
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "application": self.application.to_dict(),
            "timeline": self.timeline.to_dict(),
            "statusMessage": {
                "primary": self.status_message.primary,
                "secondary": self.status_message.secondary,
                "tone": self.status_message.tone.value,
            },
            "estimate": {
                "estimatedDays": self.estimate.estimated_days,
                "message": self.estimate.message,
                "isOverdue": self.estimate.is_overdue,
            },
            "duration": {
                "totalDays": self.duration.total_days,
                "formattedDuration": self.duration.formatted_duration,
            },
            "suggestions": list(self.suggestions),
        }


class TrackApplicationUseCase:
    """
    Use case for showing application progress to a job seeker.

    The store is only read; timelines are computed fresh on every call.
    """

    def __init__(self, store: ApplicationStorePort, timeline: TimelineService) -> None:
        """
        Initialize the use case.

        Args:
            store: Application store adapter.
            timeline: Timeline service.
        """
        self.store = store
        self.timeline = timeline

    async def execute(self, application_id: str) -> ApplicationTracking:
        """
        Build the tracking view for one application.

        Args:
            application_id: Store id of the application.

        Returns:
            ApplicationTracking for the application.

        Raises:
            ApplicationNotFoundError: If the store has no such application.
        """
        application = await self.store.get_application(application_id)
        if application is None:
            logger.warning(f"Application {application_id} not found")
            raise ApplicationNotFoundError(application_id)
        return self.track(application)

    async def list_for_applicant(
        self,
        applicant_id: str,
        statuses: Optional[list[ApplicationStatus]] = None,
    ) -> list[ApplicationTracking]:
        """Build tracking views for all of an applicant's applications."""
        applications = await self.store.get_applications_by_applicant(applicant_id, statuses)
        logger.debug(f"Tracking {len(applications)} applications for {applicant_id}")
        return [self.track(application) for application in applications]

    def track(self, application: Application) -> ApplicationTracking:
        """Pair an application record with its timeline and messaging."""
        status = application.status
        return ApplicationTracking(
            application=application,
            timeline=self.timeline.generate_timeline(
                status,
                application.applied_at,
                application.updated_at,
            ),
            status_message=self.timeline.get_status_message(
                status,
                application.applied_at,
                application.updated_at,
            ),
            estimate=self.timeline.estimate_next_step(status, application.applied_at),
            duration=self.timeline.get_duration(
                application.applied_at,
                application.updated_at,
            ),
            suggestions=self.timeline.get_action_suggestions(status, application.updated_at),
        )
