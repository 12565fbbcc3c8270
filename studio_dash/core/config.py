"""
Application Configuration Module

This module defines all configuration settings for the dashboard service.
Settings are loaded from environment variables (via .env file) using Pydantic.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application-wide configuration settings.

    All settings can be overridden via environment variables.
    The .env file is automatically loaded if present.
    """
    # === Application Metadata ===
    PROJECT_NAME: str = "Studio Dash API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"  # API version prefix for all routes

    # === Persistence Configuration ===
    # Collections are stored as JSON snapshots; SQLite is used when unset
    DATABASE_URL: Optional[str] = None  # e.g., "sqlite:///./studio.db"

    # Load the demo studio data for collections that were never stored
    SEED_DEMO_DATA: bool = True

    # === Security Configuration ===
    # IMPORTANT: Change SECRET_KEY in production to a strong random value
    SECRET_KEY: str = "your-super-secret-key-change-me"  # Used for session token signing
    ALGORITHM: str = "HS256"  # JWT encoding algorithm
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # Token validity: 1 day

    # === Logging Configuration ===
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True  # Emit one JSON object per log line

    # Pydantic configuration
    model_config = SettingsConfigDict(
        env_file=".env",        # Load environment variables from .env file
        case_sensitive=True,    # Environment variable names must match case
        extra="ignore"          # Ignore extra environment variables not defined here
    )

# Create a single global settings instance
# This is imported throughout the application for configuration access
settings = Settings()
