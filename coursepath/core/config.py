"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Graduation requirements (example for a CS major)
    total_credits_required: int = Field(120, ge=0)
    major_credits_required: int = Field(45, ge=0)
    core_credits_required: int = Field(30, ge=0)
    elective_credits_required: int = Field(45, ge=0)
    min_gpa: float = Field(2.0, ge=0, le=4)

    # Planning
    credits_per_semester: int = Field(15, gt=0)

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"  # empty string = console only

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
