"""
Unit tests for domain entities and value objects.
"""

import pytest
from datetime import datetime, timezone

from src.domain.entities import Application
from src.domain.errors import ErrorCode, InvalidStatusTransitionError
from src.domain.value_objects import ApplicationStatus, StepIcon, TimelineStep


class TestApplication:
    """Tests for Application entity."""

    def test_create_application(self):
        """Should create application with required fields."""
        app = Application(
            id="app-1",
            job_id="job-1",
            applicant_id="user-1",
            applied_at="2024-01-01T00:00:00Z",
        )

        assert app.status == ApplicationStatus.PENDING
        assert app.updated_at == "2024-01-01T00:00:00Z"
        assert app.is_terminal is False

    def test_requires_ids(self):
        """Should raise error without id or job_id."""
        with pytest.raises(ValueError, match="id is required"):
            Application(id="", job_id="job-1", applicant_id="user-1")
        with pytest.raises(ValueError, match="job_id is required"):
            Application(id="app-1", job_id="", applicant_id="user-1")

    def test_status_from_string(self):
        """Should convert string status to enum."""
        app = Application(
            id="app-1",
            job_id="job-1",
            applicant_id="user-1",
            status="shortlisted",  # type: ignore
        )

        assert app.status == ApplicationStatus.SHORTLISTED

    def test_unknown_status_rejected(self):
        """Should refuse statuses outside the lifecycle."""
        with pytest.raises(ValueError):
            Application(id="a", job_id="j", applicant_id="u", status="archived")  # type: ignore

    def test_from_dict(self):
        """Should build from a store row."""
        app = Application.from_dict({
            "id": 42,
            "job_id": "job-9",
            "applicant_id": "user-3",
            "status": "reviewing",
            "applied_at": "2024-02-01T10:00:00Z",
            "updated_at": "2024-02-03T10:00:00Z",
            "cover_letter": None,
        })

        assert app.id == "42"
        assert app.status == ApplicationStatus.REVIEWING
        assert app.updated_at == "2024-02-03T10:00:00Z"
        assert app.cover_letter == ""
        assert app.resume_url is None

    def test_from_dict_datetime_columns(self):
        """Should accept datetime columns and default updated_at."""
        app = Application.from_dict({
            "id": "a",
            "job_id": "j",
            "status": "pending",
            "applied_at": datetime(2024, 2, 1, tzinfo=timezone.utc),
        })

        assert app.applied_at == "2024-02-01T00:00:00+00:00"
        assert app.updated_at == app.applied_at

    def test_from_dict_null_applicant(self):
        """A NULL applicant column becomes an empty string."""
        app = Application.from_dict({
            "id": "a",
            "job_id": "j",
            "applicant_id": None,
            "status": "pending",
            "applied_at": "2024-02-01T00:00:00Z",
        })

        assert app.applicant_id == ""

    def test_to_dict(self):
        """Should convert to dictionary."""
        app = Application(id="a", job_id="j", applicant_id="u", applied_at="2024-01-01T00:00:00Z")
        data = app.to_dict()

        assert data["id"] == "a"
        assert data["status"] == "pending"
        assert data["applied_at"] == "2024-01-01T00:00:00Z"

    def test_transition_to(self):
        """Should move along the lifecycle and stamp updated_at."""
        app = Application(id="a", job_id="j", applicant_id="u", applied_at="2024-01-01T00:00:00Z")
        changed_at = datetime(2024, 1, 3, 9, 0, tzinfo=timezone.utc)

        app.transition_to(ApplicationStatus.REVIEWING, at=changed_at)

        assert app.status == ApplicationStatus.REVIEWING
        assert app.updated_at == "2024-01-03T09:00:00+00:00"

    def test_invalid_transition(self):
        """Should refuse to skip review."""
        app = Application(id="a", job_id="j", applicant_id="u", applied_at="2024-01-01T00:00:00Z")

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            app.transition_to(ApplicationStatus.SHORTLISTED)

        assert exc_info.value.code == ErrorCode.INVALID_TRANSITION
        assert exc_info.value.to_dict()["error"]["code"] == "INVALID_TRANSITION"
        assert app.status == ApplicationStatus.PENDING
        assert app.updated_at == "2024-01-01T00:00:00Z"

    def test_terminal_cannot_move(self):
        """Should keep terminal applications closed."""
        app = Application(id="a", job_id="j", applicant_id="u", status=ApplicationStatus.REJECTED)

        assert app.is_terminal is True
        with pytest.raises(InvalidStatusTransitionError):
            app.transition_to("reviewing")  # type: ignore


class TestTimelineStep:
    """Tests for TimelineStep value object."""

    def test_step_immutable(self):
        """TimelineStep should be immutable."""
        step = TimelineStep(
            id="applied",
            status="pending",
            label="Applied",
            description="Submitted",
            is_completed=True,
            is_current=False,
            icon=StepIcon.CHECK,
        )

        with pytest.raises(Exception):
            step.label = "other"  # type: ignore

    def test_not_both_completed_and_current(self):
        """A step cannot be completed and current at once."""
        with pytest.raises(ValueError):
            TimelineStep(
                id="reviewing",
                status="reviewing",
                label="Under Review",
                description="In progress",
                is_completed=True,
                is_current=True,
                icon=StepIcon.CURRENT,
            )

    def test_icon_from_string(self):
        """String icons are converted to the enum."""
        step = TimelineStep(
            id="final",
            status="pending",
            label="Final Decision",
            description="Decision pending",
            is_completed=False,
            is_current=False,
            icon="pending",  # type: ignore
        )
        assert step.icon is StepIcon.PENDING
