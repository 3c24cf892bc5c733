from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    # Pydantic Settings will automatically look for these as environment variables
    # or in a .env file

    # Database Settings
    # A full SQLAlchemy URL wins over the POSTGRES_* parts (e.g. "sqlite://" for tests)
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "mentor_match_db"

    # SQLAlchemy Connection Pooling Settings (PostgreSQL only)
    # Refer to https://docs.sqlalchemy.org/en/20/core/engines.html#connection-pooling-options
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30 # seconds
    DB_POOL_RECYCLE: int = 1800 # seconds (30 minutes) - recycle connections older than this

    # JWT Settings
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Profile image uploads
    MAX_IMAGE_SIZE_BYTES: int = 1024 * 1024 # 1MB

    # HTTP
    CORS_ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]

    # Per-client-IP request limit
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW_MINUTES: int = 15

    # Create mentor@test.com / mentee@test.com on startup if missing
    SEED_DEFAULT_ACCOUNTS: bool = True

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore" # Ignore extra env variables not defined here
    )

@lru_cache() # Cache settings to avoid re-reading on every call
def get_settings():
    """Returns a cached instance of the Settings."""
    return Settings()
