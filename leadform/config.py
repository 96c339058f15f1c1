"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Application
    environment: str = "prod"
    app_version: str = "v2"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Intake endpoint
    # Off by default: the endpoint accepts any well-formed JSON
    validate_intake: bool = False

    # Form controller (client side)
    intake_url: str = "http://localhost:8000/api/registro"
    request_timeout: float = 30.0
    success_reset_seconds: float = 2.5

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
