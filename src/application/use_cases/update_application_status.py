"""
Update Application Status Use Case - Employer moves an application along.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from src.application.interfaces import ApplicationStorePort
from src.domain.entities import Application
from src.domain.errors import ApplicationNotFoundError, InvalidStatusTransitionError
from src.domain.services.timeline_utils import utc_now
from src.domain.value_objects import ApplicationStatus


logger = logging.getLogger(__name__)


class UpdateApplicationStatusUseCase:
    """Validate a status change against the transition table and save it."""

    def __init__(
        self,
        store: ApplicationStorePort,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.store = store
        self.clock = clock or utc_now

    async def execute(
        self,
        application_id: str,
        new_status: Union[ApplicationStatus, str],
    ) -> Application:
        """
        Move an application to ``new_status``.

        Args:
            application_id: Store id of the application.
            new_status: Target status.

        Returns:
            The saved application with ``updated_at`` stamped.

        Raises:
            ApplicationNotFoundError: If the store has no such application.
            InvalidStatusTransitionError: If the change is not allowed.
        """
        application = await self.store.get_application(application_id)
        if application is None:
            logger.warning(f"Application {application_id} not found")
            raise ApplicationNotFoundError(application_id)

        previous = application.status
        try:
            application.transition_to(new_status, at=self.clock())
        except InvalidStatusTransitionError as e:
            logger.warning(f"Rejected status change for {application_id}: {e.message}")
            raise

        await self.store.save_application(application)
        logger.info(
            f"Application {application_id} moved from {previous.value} to {application.status.value}"
        )
        return application
