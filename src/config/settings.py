"""
Application settings using Pydantic BaseSettings.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Property Maintenance Service"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Work order completion
    COST_OVERRUN_THRESHOLD: float = 0.20  # fraction of the estimate

    # Preventive maintenance
    DUE_SCHEDULE_BATCH_SIZE: int = 100

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("COST_OVERRUN_THRESHOLD")
    @classmethod
    def validate_cost_overrun_threshold(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Cost overrun threshold cannot be negative")
        return v

    @field_validator("DUE_SCHEDULE_BATCH_SIZE")
    @classmethod
    def validate_batch_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Due schedule batch size must be positive")
        return v

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
