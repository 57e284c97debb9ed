"""
Timeline Generator - Assembles the TimelineConfig for an application.
"""

from typing import Optional, Union

from src.domain.services.status_mapping import (
    build_steps,
    get_flow_description,
    get_flow_progress,
    select_flow,
)
from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.timeline import TimelineConfig


NEXT_ACTION_MESSAGES: dict[ApplicationStatus, str] = {
    ApplicationStatus.PENDING: "Your application will be reviewed within 2-3 business days.",
    ApplicationStatus.REVIEWING: "We'll contact you within 1-2 business days with an update.",
    ApplicationStatus.SHORTLISTED: "Expect to hear from us soon regarding next steps.",
    ApplicationStatus.ACCEPTED: "Check your email for further instructions.",
    ApplicationStatus.REJECTED: "Feel free to apply for other positions that match your skills.",
}

STATUS_DESCRIPTIONS: dict[ApplicationStatus, str] = {
    ApplicationStatus.PENDING: "Your application has been received and is queued for review.",
    ApplicationStatus.REVIEWING: "Our team is currently reviewing your application and qualifications.",
    ApplicationStatus.SHORTLISTED: "Congratulations! You've been shortlisted for the next round.",
    ApplicationStatus.ACCEPTED: "Congratulations! Your application has been accepted.",
    ApplicationStatus.REJECTED: "Thank you for your interest. We've decided to move forward with other candidates.",
}


def get_next_action_message(status: Union[ApplicationStatus, str]) -> Optional[str]:
    """What the applicant should expect next."""
    parsed = ApplicationStatus.parse(status)
    return NEXT_ACTION_MESSAGES.get(parsed) if parsed is not None else None


def get_status_description(status: Union[ApplicationStatus, str]) -> Optional[str]:
    """Longer explanation of a status."""
    parsed = ApplicationStatus.parse(status)
    return STATUS_DESCRIPTIONS.get(parsed) if parsed is not None else None


def generate_timeline(
    current_status: Union[ApplicationStatus, str],
    applied_at: str,
    updated_at: str,
    strict: bool = False,
) -> TimelineConfig:
    """
    Build the timeline for an application.

    Args:
        current_status: Live application status
        applied_at: ISO submission timestamp
        updated_at: ISO timestamp of the last status change
        strict: Raise on malformed flow definitions instead of skipping steps

    Returns:
        TimelineConfig with steps and next-action guidance.
    """
    return generate_enhanced_timeline(
        current_status,
        applied_at,
        updated_at,
        include_metadata=False,
        strict=strict,
    )


def generate_enhanced_timeline(
    current_status: Union[ApplicationStatus, str],
    applied_at: str,
    updated_at: str,
    include_metadata: bool = True,
    strict: bool = False,
) -> TimelineConfig:
    """Build the timeline, optionally with flow description and progress."""
    flow = select_flow(current_status)
    steps = build_steps(flow, current_status, applied_at, updated_at, strict=strict)

    return TimelineConfig(
        steps=tuple(steps),
        current_status=current_status,
        applied_at=applied_at,
        updated_at=updated_at,
        next_action=get_next_action_message(current_status),
        flow_id=flow.id,
        flow_description=get_flow_description(current_status) if include_metadata else None,
        progress=get_flow_progress(current_status) if include_metadata else None,
    )
