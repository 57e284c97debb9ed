# Domain Value Objects
from .application_status import (
    ApplicationStatus,
    get_next_expected_step,
    is_valid_transition,
)
from .status_flow import STATUS_FLOWS, StatusFlow
from .timeline import (
    FlowProgress,
    StatusMessage,
    StepIcon,
    StepProgress,
    TimeEstimate,
    TimelineConfig,
    TimelineDuration,
    TimelineStep,
    Tone,
)

__all__ = [
    "ApplicationStatus",
    "get_next_expected_step",
    "is_valid_transition",
    "STATUS_FLOWS",
    "StatusFlow",
    "FlowProgress",
    "StatusMessage",
    "StepIcon",
    "StepProgress",
    "TimeEstimate",
    "TimelineConfig",
    "TimelineDuration",
    "TimelineStep",
    "Tone",
]
