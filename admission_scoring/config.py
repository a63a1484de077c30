"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring engine settings, read from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Admission Eligibility Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Ordinance (rule-table version) used when a caller does not pick one
    ORDINANCE_VERSION: str = Field(
        default="2025",
        min_length=1,
        description="Key into admission_scoring.scoring.rules.ORDINANCES",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def uppercase_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
