"""
Status Messaging - Applicant-facing copy for each application status.
"""

from datetime import datetime
from typing import Optional, Union

from src.domain.services.timeline_utils import DateLike, elapsed_days
from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.timeline import StatusMessage, Tone


PENDING_WARNING_DAYS = 5
REVIEWING_WARNING_DAYS = 7
PENDING_FOLLOW_UP_DAYS = 7
REVIEWING_FOLLOW_UP_DAYS = 10

UNKNOWN_DATE_LABEL = "on an unknown date"

BASE_SUGGESTIONS: dict[ApplicationStatus, tuple[str, ...]] = {
    ApplicationStatus.PENDING: (
        "Review the job description so you are ready if the employer reaches out",
        "Keep your profile and resume up to date",
    ),
    ApplicationStatus.REVIEWING: (
        "Prepare examples of your experience that match the role",
        "Keep an eye on your email for messages from the employer",
    ),
    ApplicationStatus.SHORTLISTED: (
        "Research the company and prepare for interviews",
        "Have your references ready",
    ),
    ApplicationStatus.ACCEPTED: (
        "Check your email for the offer details",
        "Respond to the employer promptly",
    ),
    ApplicationStatus.REJECTED: (
        "Browse other positions that match your skills",
        "Ask the employer for feedback if appropriate",
    ),
}

FOLLOW_UP_SUGGESTIONS: dict[ApplicationStatus, str] = {
    ApplicationStatus.PENDING: "Consider sending a short follow-up to confirm your application was received",
    ApplicationStatus.REVIEWING: "It may be worth sending a polite follow-up to ask about the timeline",
}


def _days_label(days: Optional[int]) -> str:
    if days is None:
        return UNKNOWN_DATE_LABEL
    if days == 0:
        return "today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


def _warning_tone(days: Optional[int], threshold: int) -> Tone:
    if days is not None and days > threshold:
        return Tone.WARNING
    return Tone.NEUTRAL


def get_status_message(
    status: Union[ApplicationStatus, str],
    applied_at: DateLike,
    updated_at: DateLike,
    now: Optional[datetime] = None,
    pending_warning_days: int = PENDING_WARNING_DAYS,
    reviewing_warning_days: int = REVIEWING_WARNING_DAYS,
) -> StatusMessage:
    """
    Build the headline, detail line and tone for a status.

    The tone turns to ``warning`` once a pending application has waited
    more than ``pending_warning_days`` since it was submitted, or a review
    has gone more than ``reviewing_warning_days`` without an update.
    Dates that cannot be parsed read "on an unknown date" and never warn.

    Args:
        status: Live application status
        applied_at: Submission timestamp
        updated_at: Last status change timestamp
        now: Reference time
        pending_warning_days: Threshold for pending applications
        reviewing_warning_days: Threshold for applications under review

    Returns:
        StatusMessage for display.
    """
    parsed = ApplicationStatus.parse(status)
    since_applied = elapsed_days(applied_at, now)
    since_updated = elapsed_days(updated_at, now)
    if since_updated is None:
        since_updated = since_applied

    if parsed is ApplicationStatus.PENDING:
        return StatusMessage(
            primary="Application submitted",
            secondary=f"Submitted {_days_label(since_applied)}",
            tone=_warning_tone(since_applied, pending_warning_days),
        )
    if parsed is ApplicationStatus.REVIEWING:
        return StatusMessage(
            primary="Under review",
            secondary=f"Review started {_days_label(since_updated)}",
            tone=_warning_tone(since_updated, reviewing_warning_days),
        )
    if parsed is ApplicationStatus.SHORTLISTED:
        return StatusMessage(
            primary="You've been shortlisted",
            secondary=f"Shortlisted {_days_label(since_updated)}",
            tone=Tone.POSITIVE,
        )
    if parsed is ApplicationStatus.ACCEPTED:
        return StatusMessage(
            primary="Offer extended",
            secondary=f"Accepted {_days_label(since_updated)}",
            tone=Tone.POSITIVE,
        )
    if parsed is ApplicationStatus.REJECTED:
        return StatusMessage(
            primary="Application closed",
            secondary=f"Decision made {_days_label(since_updated)}",
            tone=Tone.NEGATIVE,
        )
    return StatusMessage(
        primary="Status unavailable",
        secondary=f"Submitted {_days_label(since_applied)}",
        tone=Tone.NEUTRAL,
    )


def get_action_suggestions(
    status: Union[ApplicationStatus, str],
    updated_at: DateLike,
    now: Optional[datetime] = None,
    pending_follow_up_days: int = PENDING_FOLLOW_UP_DAYS,
    reviewing_follow_up_days: int = REVIEWING_FOLLOW_UP_DAYS,
) -> list[str]:
    """
    Guidance strings for the applicant.

    A follow-up suggestion is appended for pending and reviewing
    applications that have not changed for longer than their threshold.
    """
    parsed = ApplicationStatus.parse(status)
    if parsed is None:
        return []

    suggestions = list(BASE_SUGGESTIONS[parsed])
    thresholds = {
        ApplicationStatus.PENDING: pending_follow_up_days,
        ApplicationStatus.REVIEWING: reviewing_follow_up_days,
    }
    if parsed in thresholds:
        since_updated = elapsed_days(updated_at, now)
        if since_updated is not None and since_updated > thresholds[parsed]:
            suggestions.append(FOLLOW_UP_SUGGESTIONS[parsed])
    return suggestions
