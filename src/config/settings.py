"""
Job Board Configuration Module

Environment-based configuration with fail-fast validation.
All settings are loaded from environment variables with sensible defaults.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="JOBBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Timeline generation
    strict_flows: Optional[bool] = Field(
        default=None,
        description="Raise on unknown flow steps (defaults to on in development)",
    )
    include_flow_metadata: bool = Field(
        default=False,
        description="Attach flow description and progress to timelines",
    )
    smart_format_threshold_days: int = Field(
        default=7,
        ge=0,
        description="Age at which 'smart' timestamps switch to absolute dates",
    )

    # Status messaging thresholds (days)
    pending_warning_days: int = Field(
        default=5,
        ge=0,
        description="Warn once a pending application is older than this",
    )
    reviewing_warning_days: int = Field(
        default=7,
        ge=0,
        description="Warn once a review has gone this long without an update",
    )
    pending_follow_up_days: int = Field(
        default=7,
        ge=0,
        description="Suggest a follow-up for pending applications after this",
    )
    reviewing_follow_up_days: int = Field(
        default=10,
        ge=0,
        description="Suggest a follow-up for applications under review after this",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.env == "development"

    @property
    def strict_flow_validation(self) -> bool:
        """Whether malformed flows fail loudly."""
        if self.strict_flows is None:
            return self.is_development
        return self.strict_flows


def get_settings() -> Settings:
    """
    Get validated settings instance.

    Raises:
        ValidationError: If settings are invalid.
    """
    return Settings()


# Singleton instance for easy import
settings = get_settings()
