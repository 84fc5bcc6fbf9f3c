"""
Configuration Management for Cardiovascular Risk Estimation

Environment-based configuration using Pydantic Settings.
"""
from typing import Optional, List
from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from .env file
    )

    # Application
    app_name: str = "Cardiovascular Risk Estimation"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root level for cardiorisk loggers")

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]

    # Scoring
    scorer_backend: str = Field(default="heuristic", description="'heuristic' or 'remote'")
    prediction_url: str = Field(
        default="http://localhost:5000/predict",
        description="Remote prediction endpoint used by the remote scorer"
    )
    prediction_timeout_seconds: Optional[float] = Field(
        default=30.0,
        description="Timeout for the remote prediction call (None waits forever)"
    )

    # Input bounds (checked before the core is invoked)
    min_age: int = 18
    max_age: int = 120
    min_height_cm: float = 100.0
    max_height_cm: float = 250.0
    min_weight_kg: float = 30.0
    max_weight_kg: float = 300.0


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
