# Use Cases Package
from .track_application import ApplicationTracking, TrackApplicationUseCase
from .update_application_status import UpdateApplicationStatusUseCase

__all__ = [
    "ApplicationTracking",
    "TrackApplicationUseCase",
    "UpdateApplicationStatusUseCase",
]
