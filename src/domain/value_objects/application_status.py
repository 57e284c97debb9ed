"""
Application Status - Lifecycle statuses and their transition table.

The statuses inherit from ``(str, Enum)`` so that members compare equal to
the plain strings stored by the application store and serialize naturally
to JSON.
"""

from enum import Enum
from typing import Optional, Union


class ApplicationStatus(str, Enum):
    """Status of a job application.

    Transitions:
        pending      ->  reviewing | rejected
        reviewing    ->  shortlisted | rejected | accepted
        shortlisted  ->  accepted | rejected
        accepted, rejected are terminal
    """

    PENDING = "pending"
    REVIEWING = "reviewing"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    ACCEPTED = "accepted"

    @classmethod
    def parse(cls, value: Union["ApplicationStatus", str, None]) -> Optional["ApplicationStatus"]:
        """Return the matching status, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_terminal(self) -> bool:
        """Check if no further transitions are possible."""
        return self in (ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED)

    def allowed_transitions(self) -> frozenset["ApplicationStatus"]:
        """Statuses this status may move to."""
        return TRANSITIONS[self]

    def can_transition_to(self, other: "ApplicationStatus") -> bool:
        """Check if moving to ``other`` is allowed."""
        return other in TRANSITIONS[self]


TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({
        ApplicationStatus.REVIEWING,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.REVIEWING: frozenset({
        ApplicationStatus.SHORTLISTED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.ACCEPTED,
    }),
    ApplicationStatus.SHORTLISTED: frozenset({
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.ACCEPTED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}

NEXT_EXPECTED: dict[ApplicationStatus, Optional[ApplicationStatus]] = {
    ApplicationStatus.PENDING: ApplicationStatus.REVIEWING,
    ApplicationStatus.REVIEWING: ApplicationStatus.SHORTLISTED,
    ApplicationStatus.SHORTLISTED: ApplicationStatus.ACCEPTED,
    ApplicationStatus.ACCEPTED: None,
    ApplicationStatus.REJECTED: None,
}


def is_valid_transition(
    from_status: Union[ApplicationStatus, str],
    to_status: Union[ApplicationStatus, str],
) -> bool:
    """
    Check a status change against the transition table.

    Unknown statuses on either side are never valid.

    Args:
        from_status: Current status
        to_status: Proposed status

    Returns:
        True if the transition is allowed.
    """
    source = ApplicationStatus.parse(from_status)
    target = ApplicationStatus.parse(to_status)
    if source is None or target is None:
        return False
    return source.can_transition_to(target)


def get_next_expected_step(
    status: Union[ApplicationStatus, str],
) -> Optional[ApplicationStatus]:
    """Return the status an application normally moves to next, if any."""
    parsed = ApplicationStatus.parse(status)
    if parsed is None:
        return None
    return NEXT_EXPECTED[parsed]
