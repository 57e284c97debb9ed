"""
Domain Errors - Structured exceptions for the application timeline.

Timeline rendering itself never raises for bad dates or unknown statuses;
these errors cover configuration integrity and application state changes.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Structured error codes."""
    FLOW_CONFIGURATION = "FLOW_CONFIGURATION"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    APPLICATION_NOT_FOUND = "APPLICATION_NOT_FOUND"


class JobBoardError(Exception):
    """Base exception carrying a structured error code."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        """
        Initialize a domain error.

        Args:
            code: The error code
            message: Human-readable error message
        """
        self.code = code
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary format for API responses."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }


class FlowConfigurationError(JobBoardError):
    """A status flow definition is malformed."""

    def __init__(self, message: str, flow_id: str, step_id: Optional[str] = None) -> None:
        self.flow_id = flow_id
        self.step_id = step_id
        super().__init__(ErrorCode.FLOW_CONFIGURATION, message)


class InvalidStatusTransitionError(JobBoardError):
    """An application cannot move from one status to another."""

    def __init__(self, from_status: str, to_status: str) -> None:
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            ErrorCode.INVALID_TRANSITION,
            f"Cannot move application from '{from_status}' to '{to_status}'",
        )


class ApplicationNotFoundError(JobBoardError):
    """No application exists with the given id."""

    def __init__(self, application_id: str) -> None:
        self.application_id = application_id
        super().__init__(
            ErrorCode.APPLICATION_NOT_FOUND,
            f"Application not found: {application_id}",
        )
