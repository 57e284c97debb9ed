"""
StatusFlow Value Object - Named narrative paths through the hiring process.
"""

from dataclasses import dataclass, field
from types import MappingProxyType

from src.domain.errors import FlowConfigurationError


APPLIED_STEP = "applied"


@dataclass(frozen=True)
class StatusFlow:
    """
    Immutable ordered template of abstract step identifiers.

    Attributes:
        id: Unique flow key (e.g., "standard")
        name: Display name
        description: Short explanation of the path
        steps: Ordered step ids; always begins with "applied"
    """

    id: str
    name: str
    description: str
    steps: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Convert lists to tuples and check the first step."""
        if isinstance(self.steps, list):
            object.__setattr__(self, "steps", tuple(self.steps))
        if not self.steps or self.steps[0] != APPLIED_STEP:
            raise FlowConfigurationError(
                f"Flow '{self.id}' must begin with the '{APPLIED_STEP}' step",
                flow_id=self.id,
            )

    @property
    def last_step(self) -> str:
        """Terminal node of the narrative."""
        return self.steps[-1]

    def includes(self, step_id: str) -> bool:
        """Check if the flow passes through ``step_id``."""
        return step_id in self.steps


STANDARD = StatusFlow(
    id="standard",
    name="Standard Flow",
    description="Standard hiring process with all stages",
    steps=("applied", "reviewing", "shortlisted", "final"),
)

EXPRESS_REJECTION = StatusFlow(
    id="express_rejection",
    name="Express Rejection",
    description="Quick rejection after initial review",
    steps=("applied", "reviewing", "rejected"),
)

# Defined but never chosen by the flow selector.
DIRECT_SHORTLIST = StatusFlow(
    id="direct_shortlist",
    name="Direct Shortlist",
    description="Fast-tracked to shortlist without extended review",
    steps=("applied", "shortlisted", "final"),
)

IMMEDIATE_ACCEPTANCE = StatusFlow(
    id="immediate_acceptance",
    name="Immediate Acceptance",
    description="Direct acceptance without multiple rounds",
    steps=("applied", "accepted"),
)

STATUS_FLOWS = MappingProxyType({
    flow.id: flow
    for flow in (STANDARD, EXPRESS_REJECTION, DIRECT_SHORTLIST, IMMEDIATE_ACCEPTANCE)
})
