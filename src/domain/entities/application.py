"""
Application Entity - A job seeker's submission against a job posting.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from src.domain.errors import InvalidStatusTransitionError
from src.domain.value_objects.application_status import ApplicationStatus


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class Application:
    """
    Application entity tracked through the status lifecycle.

    Corresponds to a row of the ``job_applications`` table owned by the
    application store. Timestamps are kept as the ISO-8601 strings the
    store returns so timelines echo them unchanged.

    Attributes:
        id: Store primary key
        job_id: Job posting the application targets
        applicant_id: Job seeker who applied
        status: Current lifecycle status
        applied_at: Submission timestamp
        updated_at: Timestamp of the last status change
        cover_letter: Optional cover letter text
        resume_url: Optional uploaded resume location
    """

    id: str
    job_id: str
    applicant_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: str = field(default_factory=_utc_now_iso)
    updated_at: str = ""
    cover_letter: str = ""
    resume_url: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate and normalize application data."""
        if not self.id:
            raise ValueError("id is required")
        if not self.job_id:
            raise ValueError("job_id is required")

        # Convert string status to enum if needed
        if not isinstance(self.status, ApplicationStatus):
            self.status = ApplicationStatus(self.status)

        if not self.updated_at:
            self.updated_at = self.applied_at

    @property
    def is_terminal(self) -> bool:
        """Check if the application has reached a final decision."""
        return self.status.is_terminal

    def transition_to(
        self,
        new_status: ApplicationStatus,
        at: Optional[datetime] = None,
    ) -> None:
        """
        Move the application to a new status.

        Args:
            new_status: Target status
            at: Time of the change (defaults to now, UTC)

        Raises:
            InvalidStatusTransitionError: If the transition table forbids it.
        """
        target = ApplicationStatus.parse(new_status)
        if target is None or not self.status.can_transition_to(target):
            raise InvalidStatusTransitionError(
                self.status.value,
                str(getattr(new_status, "value", new_status)),
            )

        self.status = target
        self.updated_at = (at or datetime.now(timezone.utc)).isoformat()

    def to_dict(self) -> dict:
        """Convert to dictionary for the application store."""
        return {
            "id": self.id,
            "job_id": self.job_id,
            "applicant_id": self.applicant_id,
            "status": self.status.value,
            "applied_at": self.applied_at,
            "updated_at": self.updated_at,
            "cover_letter": self.cover_letter,
            "resume_url": self.resume_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Application":
        """Create Application from dictionary (store row)."""
        applied_at = data["applied_at"]
        if isinstance(applied_at, datetime):
            applied_at = applied_at.isoformat()
        updated_at = data.get("updated_at") or applied_at
        if isinstance(updated_at, datetime):
            updated_at = updated_at.isoformat()

        return cls(
            id=str(data["id"]),
            job_id=str(data["job_id"]),
            applicant_id=str(data.get("applicant_id") or ""),
            status=ApplicationStatus(data["status"]),
            applied_at=applied_at,
            updated_at=updated_at,
            cover_letter=data.get("cover_letter") or "",
            resume_url=data.get("resume_url"),
        )
