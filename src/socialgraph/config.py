"""
Configuration management for the socialgraph backend
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Document store
    store_backend: str = "mongo"  # 'mongo', 'memory'
    mongo_url: str | None = None
    mongo_database: str = "P5DB"

    # Password hashing (bcrypt cost factor)
    password_hash_rounds: int = 12

    # Reference resolution
    batch_references: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SOCIALGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()

if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        store_backend=settings.store_backend,
        environment=settings.environment,
    )
