"""
Application configuration with Pydantic Settings for validation and type safety.
Supports .env file loading; only the entry point and the module-level engine read it.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Loader settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Remote API
    api_key: str = Field(
        default="INSERT_YOUR_API_KEY_HERE",
        description="Subscription key sent with every API request",
    )
    api_base_url: str = Field(
        default="https://services.chipotle.com", description="API base URL"
    )
    http_timeout_sec: float = Field(
        default=30.0, gt=0, description="Per-request HTTP timeout"
    )

    # Database settings
    database_url: str = Field(
        default="sqlite:///./chipotle.db",
        description="SQLAlchemy URL of the destination store",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    fast_load_pragmas: bool = Field(
        default=True,
        description="Relax SQLite durability pragmas while loading",
    )

    # Fetch pool
    fetch_worker_count: int = Field(
        default=75, ge=1, description="Concurrent menu fetch workers"
    )

    # Search query
    search_latitude: float = Field(default=38.495693700000004)
    search_longitude: float = Field(default=-121.19452040000002)
    search_radius: int = Field(default=9046700, description="Search radius in meters")
    search_page_size: int = Field(default=4000, ge=1)
    search_restaurant_statuses: list[str] = Field(default=["OPEN", "LAB"])
    search_concept_ids: list[str] = Field(default=["CMG"])
    search_order_by: str = Field(default="distance")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


# Global settings instance
settings = Settings()
