"""
Timeline Value Objects - Immutable records handed to the presentation layer.

``to_dict`` methods use the camelCase keys the presentation layer renders.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StepIcon(str, Enum):
    """Icon shown on a timeline node."""

    CHECK = "check"
    CURRENT = "current"
    REJECTED = "rejected"
    ACCEPTED = "accepted"
    PENDING = "pending"


class Tone(str, Enum):
    """Coarse sentiment used to style status messaging."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    WARNING = "warning"


@dataclass(frozen=True)
class TimelineStep:
    """
    One visual node in an application timeline.

    Attributes:
        id: Step identifier, unique within its flow
        status: Application status the node stands for ("pending" as placeholder)
        label: Short display title
        description: Short display subtitle
        is_completed: Whether the step has been passed
        is_current: Whether the application currently sits on this step
        icon: Node icon
        timestamp: ISO-8601 string, only when the step has been reached
    """

    id: str
    status: str
    label: str
    description: str
    is_completed: bool
    is_current: bool
    icon: StepIcon
    timestamp: Optional[str] = None

    def __post_init__(self) -> None:
        """A step is never both completed and current."""
        if self.is_completed and self.is_current:
            raise ValueError(f"Step '{self.id}' cannot be both completed and current")
        if isinstance(self.icon, str) and not isinstance(self.icon, StepIcon):
            object.__setattr__(self, "icon", StepIcon(self.icon))

    def to_dict(self) -> dict:
        """Convert to the presentation layer's shape."""
        data = {
            "id": self.id,
            "status": str(getattr(self.status, "value", self.status)),
            "label": self.label,
            "description": self.description,
            "isCompleted": self.is_completed,
            "isCurrent": self.is_current,
            "icon": self.icon.value,
        }
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp
        return data


@dataclass(frozen=True)
class FlowProgress:
    """Estimated progress through the selected flow."""

    percentage: int
    completed_steps: int
    total_steps: int

    def to_dict(self) -> dict:
        return {
            "percentage": self.percentage,
            "completedSteps": self.completed_steps,
            "totalSteps": self.total_steps,
        }


@dataclass(frozen=True)
class StepProgress:
    """Progress counted from an already built step list."""

    completed: int
    total: int
    percentage: int


@dataclass(frozen=True)
class TimelineConfig:
    """
    Aggregate returned to the presentation layer.

    Attributes:
        steps: Ordered timeline nodes
        current_status: Status the timeline was built for
        applied_at: ISO timestamp the application was submitted
        updated_at: ISO timestamp of the last status change
        next_action: Guidance for the applicant
        flow_id: Flow the steps were expanded from
        flow_description: Optional flow explanation (metadata)
        progress: Optional flow progress (metadata)
    """

    steps: tuple[TimelineStep, ...]
    current_status: str
    applied_at: str
    updated_at: str
    next_action: Optional[str] = None
    flow_id: str = "standard"
    flow_description: Optional[str] = None
    progress: Optional[FlowProgress] = None

    def __post_init__(self) -> None:
        """Convert mutable lists to immutable tuples."""
        if isinstance(self.steps, list):
            object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def current_step(self) -> Optional[TimelineStep]:
        """The step marked current, if any."""
        return next((step for step in self.steps if step.is_current), None)

    def get_step(self, step_id: str) -> Optional[TimelineStep]:
        """Look up a step by id."""
        return next((step for step in self.steps if step.id == step_id), None)

    def to_dict(self) -> dict:
        """Convert to the presentation layer's shape."""
        data = {
            "steps": [step.to_dict() for step in self.steps],
            "currentStatus": str(getattr(self.current_status, "value", self.current_status)),
            "appliedAt": self.applied_at,
            "updatedAt": self.updated_at,
            "nextAction": self.next_action,
        }
        if self.flow_description is not None:
            data["flowDescription"] = self.flow_description
        if self.progress is not None:
            data["progress"] = self.progress.to_dict()
        return data


@dataclass(frozen=True)
class StatusMessage:
    """Headline, detail line and tone for a status."""

    primary: str
    secondary: str
    tone: Tone


@dataclass(frozen=True)
class TimeEstimate:
    """Expected wait before the next status change."""

    estimated_days: int
    message: str
    is_overdue: bool = False


@dataclass(frozen=True)
class TimelineDuration:
    """Whole days an application has been open."""

    total_days: int
    formatted_duration: str

