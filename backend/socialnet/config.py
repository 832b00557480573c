"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_database_name: str = "socialnet"
    mongo_connect_timeout_seconds: float = 5.0

    # Seed data used by the database reset
    seed_data_path: str = "config/defaultdb.json"
    reset_on_startup: bool = False

    # Password hashing (fixed salt so hashes can be matched in queries)
    password_salt: str = "CHANGE_ME_IN_PRODUCTION"
    password_rounds: int = 29000

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 30

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
