"""
Core configuration and settings for the FastAPI application.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="NEUDEBRI_", case_sensitive=False
    )

    # Application Info
    app_name: str = "Neudebri Health API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS Settings
    cors_origins: list = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list = ["*"]
    cors_allow_headers: list = ["*"]

    # Demo identity used when a request omits userId / role / patientId
    default_user_id: str = "patient-001"
    default_role: str = "patient"

    # Store
    seed_demo_data: bool = True
    certification_expiry_days: int = 30


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Export settings instance
settings = get_settings()
