"""
Status Mapping - Flow selection and step expansion for application timelines.

Turns ``(status, applied_at, updated_at)`` into ordered ``TimelineStep``
records:

1. ``select_flow`` picks the narrative path for the current status.
2. ``build_steps`` expands the flow's step ids using the step templates,
   resolving completion markers and timestamps per step.

Everything here is a pure function of its arguments.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from src.domain.errors import FlowConfigurationError
from src.domain.value_objects.application_status import ApplicationStatus
from src.domain.value_objects.status_flow import (
    APPLIED_STEP,
    EXPRESS_REJECTION,
    STANDARD,
    STATUS_FLOWS,
    StatusFlow,
)
from src.domain.value_objects.timeline import FlowProgress, StepIcon, TimelineStep
from src.domain.services.timeline_utils import round_half_up


logger = logging.getLogger(__name__)

StatusLike = Union[ApplicationStatus, str]


@dataclass(frozen=True)
class StepTemplate:
    """Label, description and status shown for a step id."""

    status: str
    label: str
    description: str


STEP_TEMPLATES: dict[str, StepTemplate] = {
    "applied": StepTemplate(ApplicationStatus.PENDING.value, "Applied", "Submitted"),
    "reviewing": StepTemplate(ApplicationStatus.REVIEWING.value, "Under Review", "In progress"),
    "shortlisted": StepTemplate(ApplicationStatus.SHORTLISTED.value, "Shortlisted", "Next round"),
    "final": StepTemplate(ApplicationStatus.PENDING.value, "Final Decision", "Decision pending"),
    "rejected": StepTemplate(ApplicationStatus.REJECTED.value, "Not Selected", "Application closed"),
    "accepted": StepTemplate(ApplicationStatus.ACCEPTED.value, "Offer Extended", "Congratulations!"),
}

# The "final" node reads as the decision once one has been made.
FINAL_DECISION_TEMPLATES: dict[ApplicationStatus, StepTemplate] = {
    ApplicationStatus.ACCEPTED: StepTemplate(ApplicationStatus.ACCEPTED.value, "Accepted", "Offer made"),
    ApplicationStatus.REJECTED: StepTemplate(ApplicationStatus.REJECTED.value, "Rejected", "Not selected"),
}

# Ordering used to compare a step against the live status.
STATUS_ORDER: tuple[ApplicationStatus, ...] = (
    ApplicationStatus.PENDING,
    ApplicationStatus.REVIEWING,
    ApplicationStatus.SHORTLISTED,
    ApplicationStatus.ACCEPTED,
)

STEP_COMPARATOR_STATUS: dict[str, ApplicationStatus] = {
    "reviewing": ApplicationStatus.REVIEWING,
    "shortlisted": ApplicationStatus.SHORTLISTED,
    "final": ApplicationStatus.ACCEPTED,
}

# Statuses that confirm a step has been reached (and so carries updated_at).
STEP_REACHED_BY: dict[str, frozenset[ApplicationStatus]] = {
    "reviewing": frozenset({
        ApplicationStatus.REVIEWING,
        ApplicationStatus.SHORTLISTED,
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
    }),
    "shortlisted": frozenset({
        ApplicationStatus.SHORTLISTED,
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
    }),
    "final": frozenset({ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED}),
    "rejected": frozenset({ApplicationStatus.REJECTED}),
    "accepted": frozenset({ApplicationStatus.ACCEPTED}),
}

FLOW_DESCRIPTIONS: dict[str, str] = {
    "standard": "Your application is following the standard hiring process with multiple review stages.",
    "express_rejection": "Your application was reviewed and a decision was made quickly.",
    "direct_shortlist": "Great news! Your application was fast-tracked to the shortlist stage.",
    "immediate_acceptance": "Excellent! Your application resulted in an immediate job offer.",
}

_COMPLETED = (True, False, StepIcon.CHECK)
_CURRENT = (False, True, StepIcon.CURRENT)
_PENDING = (False, False, StepIcon.PENDING)


def select_flow(current_status: StatusLike) -> StatusFlow:
    """
    Choose the flow that narrates the current status.

    Rejections are always told as the express path and acceptances as the
    full standard path. ``direct_shortlist`` and ``immediate_acceptance``
    are never selected here.

    Args:
        current_status: Live application status (unknown values allowed)

    Returns:
        The selected flow; ``standard`` for anything unmapped.
    """
    if ApplicationStatus.parse(current_status) is ApplicationStatus.REJECTED:
        return EXPRESS_REJECTION
    return STANDARD


def get_flow(flow_id: str) -> StatusFlow:
    """Look up a built-in flow by id, falling back to ``standard``."""
    return STATUS_FLOWS.get(flow_id, STANDARD)


def build_steps(
    flow: StatusFlow,
    current_status: StatusLike,
    applied_at: str,
    updated_at: str,
    strict: bool = False,
) -> list[TimelineStep]:
    """
    Expand a flow into fully populated timeline steps.

    Args:
        flow: Flow whose step ids are expanded in order
        current_status: Live application status
        applied_at: ISO submission timestamp
        updated_at: ISO timestamp of the last status change
        strict: Raise on step ids without a template instead of skipping

    Returns:
        Ordered list of steps.

    Raises:
        FlowConfigurationError: In strict mode, for an unknown step id.
    """
    status = ApplicationStatus.parse(current_status)
    steps: list[TimelineStep] = []

    for index, step_id in enumerate(flow.steps):
        template = _resolve_template(step_id, status)
        if template is None:
            if strict:
                raise FlowConfigurationError(
                    f"Flow '{flow.id}' references unknown step '{step_id}'",
                    flow_id=flow.id,
                    step_id=step_id,
                )
            logger.warning(f"Skipping unknown step '{step_id}' in flow '{flow.id}'")
            continue

        is_completed, is_current, icon = _resolve_step_state(step_id, status, index, flow.steps)
        steps.append(TimelineStep(
            id=step_id,
            status=template.status,
            label=template.label,
            description=template.description,
            is_completed=is_completed,
            is_current=is_current,
            icon=icon,
            timestamp=_resolve_step_timestamp(step_id, status, applied_at, updated_at, index),
        ))

    return steps


def _resolve_template(step_id: str, status: Optional[ApplicationStatus]) -> Optional[StepTemplate]:
    if step_id == "final" and status in FINAL_DECISION_TEMPLATES:
        return FINAL_DECISION_TEMPLATES[status]
    return STEP_TEMPLATES.get(step_id)


def _resolve_step_state(
    step_id: str,
    status: Optional[ApplicationStatus],
    index: int,
    flow_steps: tuple[str, ...],
) -> tuple[bool, bool, StepIcon]:
    """Return ``(is_completed, is_current, icon)`` for one step."""
    if status is ApplicationStatus.REJECTED:
        if step_id == APPLIED_STEP:
            return _COMPLETED
        if step_id in ("rejected", "final"):
            return (True, False, StepIcon.REJECTED)
        # Everything before the terminal node is treated as having happened.
        return _COMPLETED if index < len(flow_steps) - 1 else _PENDING

    if status is ApplicationStatus.ACCEPTED:
        if step_id == "accepted" or (step_id == "final" and flow_steps[-1] == "final"):
            return (True, False, StepIcon.ACCEPTED)
        return _COMPLETED

    if step_id == APPLIED_STEP:
        return _COMPLETED

    comparator = STEP_COMPARATOR_STATUS.get(step_id)
    if comparator is None or status is None:
        return _PENDING

    step_index = STATUS_ORDER.index(comparator)
    current_index = STATUS_ORDER.index(status)

    if step_index < current_index:
        return _COMPLETED
    if step_index == current_index or step_id == status.value:
        return _CURRENT
    # The applied node stands in for "pending", so review is what is under way.
    if status is ApplicationStatus.PENDING and step_id == "reviewing":
        return _CURRENT
    return _PENDING


def _resolve_step_timestamp(
    step_id: str,
    status: Optional[ApplicationStatus],
    applied_at: str,
    updated_at: str,
    index: int,
) -> Optional[str]:
    if step_id == APPLIED_STEP:
        return applied_at
    if index == 0:
        return updated_at
    if status is not None and status in STEP_REACHED_BY.get(step_id, frozenset()):
        return updated_at
    return None


def get_flow_description(status: StatusLike) -> str:
    """User-facing explanation of the flow selected for ``status``."""
    flow = select_flow(status)
    return FLOW_DESCRIPTIONS.get(flow.id, FLOW_DESCRIPTIONS["standard"])


def get_flow_progress(status: StatusLike) -> FlowProgress:
    """
    Estimate how far through its flow an application is.

    Args:
        status: Live application status

    Returns:
        FlowProgress with a percentage in [0, 100].
    """
    flow = select_flow(status)
    total_steps = len(flow.steps)
    parsed = ApplicationStatus.parse(status)

    if parsed is ApplicationStatus.PENDING:
        completed_steps = 1
    elif parsed is ApplicationStatus.REVIEWING:
        completed_steps = 2
    elif parsed is ApplicationStatus.SHORTLISTED:
        completed_steps = 3 if flow.includes("reviewing") else 2
    elif parsed is not None and parsed.is_terminal:
        completed_steps = total_steps
    else:
        completed_steps = 0

    completed_steps = min(completed_steps, total_steps)
    return FlowProgress(
        percentage=round_half_up(completed_steps / total_steps * 100),
        completed_steps=completed_steps,
        total_steps=total_steps,
    )
