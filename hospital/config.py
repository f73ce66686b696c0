"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        app_name: Title shown in the OpenAPI docs
        app_version: API version string
        api_prefix: Path prefix every resource router is mounted under
        log_level: Root logging level (DEBUG, INFO, WARNING, ...)

        # Frontend settings
        cors_origins: Origins allowed to call the API from a browser

        # Storage settings
        seed_departments: Whether to pre-populate the four default departments
    """
    app_name: str = "Hospital Management API"
    app_version: str = "1.0.0"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    # Frontend settings
    cors_origins: List[str] = [
        "http://localhost:3000",  # Frontend development server
        "http://localhost:5173",
    ]

    # Storage settings
    seed_departments: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Create settings instance
settings = Settings()
