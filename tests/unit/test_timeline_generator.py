"""
Unit tests for timeline assembly.
"""

import pytest

from src.domain.services.timeline_generator import (
    generate_enhanced_timeline,
    generate_timeline,
    get_next_action_message,
    get_status_description,
)
from src.domain.value_objects import ApplicationStatus, StepIcon


APPLIED_AT = "2024-01-01T00:00:00Z"
UPDATED_AT = "2024-01-05T12:00:00Z"

ALL_STATUSES = list(ApplicationStatus)


class TestGenerateTimeline:
    """Tests for generate_timeline."""

    def test_pending_example(self):
        """A fresh application: four steps, review under way."""
        timeline = generate_timeline("pending", APPLIED_AT, APPLIED_AT)

        assert timeline.flow_id == "standard"
        assert len(timeline.steps) == 4
        assert timeline.steps[0].is_completed is True
        assert timeline.steps[0].timestamp == APPLIED_AT
        assert timeline.current_step.id == "reviewing"
        assert timeline.get_step("shortlisted").timestamp is None
        assert timeline.get_step("final").timestamp is None
        assert timeline.next_action == "Your application will be reviewed within 2-3 business days."

    def test_rejected_example(self):
        """A rejection uses the express flow, all steps done."""
        timeline = generate_timeline("rejected", APPLIED_AT, UPDATED_AT)

        assert timeline.flow_id == "express_rejection"
        assert [step.id for step in timeline.steps] == ["applied", "reviewing", "rejected"]
        assert all(step.is_completed for step in timeline.steps)
        assert timeline.get_step("rejected").icon == StepIcon.REJECTED
        assert timeline.get_step("rejected").timestamp == UPDATED_AT

    def test_accepted_example(self):
        """An acceptance narrates the full standard path."""
        timeline = generate_timeline("accepted", APPLIED_AT, UPDATED_AT)
        final = timeline.get_step("final")

        assert timeline.flow_id == "standard"
        assert len(timeline.steps) == 4
        assert all(step.is_completed for step in timeline.steps)
        assert final.label == "Accepted"
        assert final.icon == StepIcon.ACCEPTED
        assert final.timestamp == UPDATED_AT

    def test_echoes_inputs(self):
        """Status and timestamps are passed through unchanged."""
        timeline = generate_timeline(ApplicationStatus.REVIEWING, APPLIED_AT, UPDATED_AT)

        assert timeline.current_status == ApplicationStatus.REVIEWING
        assert timeline.applied_at == APPLIED_AT
        assert timeline.updated_at == UPDATED_AT

    def test_plain_timeline_has_no_metadata(self):
        """Metadata is only attached by the enhanced variant."""
        timeline = generate_timeline("reviewing", APPLIED_AT, UPDATED_AT)
        assert timeline.flow_description is None
        assert timeline.progress is None

    def test_unknown_status_never_raises(self):
        """Unknown statuses produce a standard timeline without next action."""
        timeline = generate_timeline("archived", APPLIED_AT, UPDATED_AT)
        assert len(timeline.steps) == 4
        assert timeline.next_action is None


class TestTimelineProperties:
    """Invariants that hold for every status."""

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_steps_never_empty(self, status):
        """Every status yields steps."""
        assert generate_timeline(status, APPLIED_AT, UPDATED_AT).steps

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_at_most_one_current(self, status):
        """No timeline has two current steps."""
        steps = generate_timeline(status, APPLIED_AT, UPDATED_AT).steps
        assert sum(step.is_current for step in steps) <= 1

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_applied_timestamp_is_input(self, status):
        """The applied step always carries applied_at."""
        timeline = generate_timeline(status, APPLIED_AT, UPDATED_AT)
        assert timeline.get_step("applied").timestamp == APPLIED_AT

    @pytest.mark.parametrize("status", ["accepted", "rejected"])
    def test_terminal_statuses_complete(self, status):
        """Terminal timelines have every step completed."""
        steps = generate_timeline(status, APPLIED_AT, UPDATED_AT).steps
        assert all(step.is_completed for step in steps)

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_progress_bounds(self, status):
        """Progress stays within 0-100 and never exceeds the step count."""
        progress = generate_enhanced_timeline(status, APPLIED_AT, UPDATED_AT).progress
        assert 0 <= progress.percentage <= 100
        assert progress.completed_steps <= progress.total_steps


class TestEnhancedTimeline:
    """Tests for the metadata-carrying variant."""

    def test_shortlisted_metadata(self):
        """Shortlisted on the standard flow is three quarters done."""
        timeline = generate_enhanced_timeline("shortlisted", APPLIED_AT, UPDATED_AT)

        assert timeline.progress.completed_steps == 3
        assert timeline.progress.total_steps == 4
        assert timeline.progress.percentage == 75
        assert "standard hiring process" in timeline.flow_description

    def test_metadata_can_be_disabled(self):
        """include_metadata=False behaves like generate_timeline."""
        timeline = generate_enhanced_timeline("shortlisted", APPLIED_AT, UPDATED_AT, include_metadata=False)
        assert timeline.progress is None


class TestSerialization:
    """Tests for the presentation layer's dictionary shape."""

    def test_to_dict_keys(self):
        """Keys follow the presentation layer's naming."""
        data = generate_enhanced_timeline("reviewing", APPLIED_AT, UPDATED_AT).to_dict()

        assert data["currentStatus"] == "reviewing"
        assert data["appliedAt"] == APPLIED_AT
        assert data["nextAction"].startswith("We'll contact you")
        assert data["progress"] == {"percentage": 50, "completedSteps": 2, "totalSteps": 4}
        assert "flowDescription" in data

        reviewing = data["steps"][1]
        assert reviewing["isCurrent"] is True
        assert reviewing["isCompleted"] is False
        assert reviewing["icon"] == "current"
        assert reviewing["timestamp"] == UPDATED_AT

    def test_missing_timestamp_omitted(self):
        """Steps that have not been reached carry no timestamp key."""
        data = generate_timeline("pending", APPLIED_AT, APPLIED_AT).to_dict()
        assert "timestamp" not in data["steps"][3]
        assert "progress" not in data


class TestMessages:
    """Tests for the per-status text tables."""

    @pytest.mark.parametrize("status", ALL_STATUSES)
    def test_every_status_has_copy(self, status):
        """Each known status has a next action and description."""
        assert get_next_action_message(status)
        assert get_status_description(status)

    def test_unknown_status_has_no_copy(self):
        """Unknown statuses return None."""
        assert get_next_action_message("archived") is None
        assert get_status_description("archived") is None
