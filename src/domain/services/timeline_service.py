"""
Timeline Service - Settings-aware facade over the timeline functions.

Holds the configured thresholds and an injectable clock so callers get
deterministic output in tests and the current time in production.
"""

from datetime import datetime
from typing import Callable, Optional, Union

from src.config.settings import Settings
from src.domain.services.status_messaging import get_action_suggestions, get_status_message
from src.domain.services.timeline_generator import generate_enhanced_timeline
from src.domain.services.timeline_utils import (
    DateLike,
    TimestampFormat,
    estimate_time_to_next_step,
    format_timeline_timestamp,
    get_timeline_duration,
    utc_now,
)
from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.timeline import (
    StatusMessage,
    TimeEstimate,
    TimelineConfig,
    TimelineDuration,
)


Clock = Callable[[], datetime]
StatusLike = Union[ApplicationStatus, str]


class TimelineService:
    """
    Timeline generation and messaging for application records.

    Every time-dependent result reads the clock once per call.
    """

    def __init__(self, settings: Settings, clock: Optional[Clock] = None) -> None:
        """
        Initialize the service.

        Args:
            settings: Thresholds and flow validation mode.
            clock: Returns the current time; defaults to UTC now.
        """
        self.settings = settings
        self.clock = clock or utc_now

    def generate_timeline(
        self,
        status: StatusLike,
        applied_at: str,
        updated_at: str,
        include_metadata: Optional[bool] = None,
    ) -> TimelineConfig:
        """
        Build a timeline.

        Args:
            status: Live application status
            applied_at: ISO submission timestamp
            updated_at: ISO timestamp of the last status change
            include_metadata: Override ``settings.include_flow_metadata``

        Returns:
            TimelineConfig for the presentation layer.
        """
        if include_metadata is None:
            include_metadata = self.settings.include_flow_metadata
        return generate_enhanced_timeline(
            status,
            applied_at,
            updated_at,
            include_metadata=include_metadata,
            strict=self.settings.strict_flow_validation,
        )

    def format_timestamp(self, value: DateLike, fmt: TimestampFormat = "smart") -> str:
        """Format a timestamp relative to the service clock."""
        return format_timeline_timestamp(
            value,
            fmt,
            now=self.clock(),
            smart_threshold_days=self.settings.smart_format_threshold_days,
        )

    def get_duration(self, applied_at: DateLike, updated_at: DateLike = None) -> TimelineDuration:
        """Days from submission to the last update, or to the service clock."""
        return get_timeline_duration(applied_at, updated_at, now=self.clock())

    def estimate_next_step(self, status: StatusLike, applied_at: DateLike) -> TimeEstimate:
        """Expected wait for the next step, with overdue measured by the service clock."""
        return estimate_time_to_next_step(status, applied_at, now=self.clock())

    def get_status_message(
        self,
        status: StatusLike,
        applied_at: DateLike,
        updated_at: DateLike,
    ) -> StatusMessage:
        """Status copy and tone using the configured warning thresholds."""
        return get_status_message(
            status,
            applied_at,
            updated_at,
            now=self.clock(),
            pending_warning_days=self.settings.pending_warning_days,
            reviewing_warning_days=self.settings.reviewing_warning_days,
        )

    def get_action_suggestions(self, status: StatusLike, updated_at: DateLike) -> list[str]:
        """Suggestions for the applicant using the configured follow-up thresholds."""
        return get_action_suggestions(
            status,
            updated_at,
            now=self.clock(),
            pending_follow_up_days=self.settings.pending_follow_up_days,
            reviewing_follow_up_days=self.settings.reviewing_follow_up_days,
        )
