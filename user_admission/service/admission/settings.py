"""
Admission Settings for the User Admission Service.

This module contains the configurable policy constants used by the
admission pipeline. They are loaded once per process and are not
changed afterwards.

Environment variables use the ADMISSION_ prefix:
    ADMISSION_MINIMUM_AGE=21
    ADMISSION_MINIMUM_CREDIT_LIMIT=500
    ADMISSION_IMPORTANT_CLIENT_MULTIPLIER=2

Usage:
    from user_admission.service.admission.settings import admission_settings

    # Use default settings (loaded from env)
    minimum_age = admission_settings.minimum_age

    # Or create custom settings for testing
    custom = AdmissionSettings(minimum_credit_limit=1000)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdmissionSettings(BaseSettings):
    """
    Configurable parameters for the admission policy.

    All settings can be overridden via environment variables with ADMISSION_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="ADMISSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # === Age Policy ===
    minimum_age: int = Field(
        default=21,
        ge=0,
        description="Minimum age in whole years required for admission",
    )

    # === Credit Limit Gate ===
    minimum_credit_limit: int = Field(
        default=500,
        ge=0,
        description="Enforced credit limits below this value are rejected",
    )

    # === Strategy Parameters ===
    important_client_multiplier: int = Field(
        default=2,
        ge=1,
        description="Factor applied to the external credit limit for important clients",
    )


@lru_cache
def get_admission_settings() -> AdmissionSettings:
    """Get cached admission settings instance."""
    return AdmissionSettings()


admission_settings = get_admission_settings()
