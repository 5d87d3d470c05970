"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Content store ("memory" or "sql")
    store_backend: str = "memory"
    database_url: str = "postgresql+asyncpg://coolstff:coolstff_dev_password@db:5432/coolstff"

    # Admin authentication
    admin_api_key: str = "dev-admin-key-change-in-production"

    # Home page
    featured_products_limit: int = 6
    featured_articles_limit: int = 3
    home_categories_limit: int = 4

    # Listings
    default_page_size: int = 20
    max_page_size: int = 100

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
