"""Application configuration using Pydantic Settings.

Reads configuration from environment variables with sensible defaults.
Secrets (database password) should be provided via environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # =========================================================================
    # Application
    # =========================================================================
    environment: Literal["prod", "staging", "dev", "test"] = Field(
        default="dev",
        description="Environment name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # =========================================================================
    # Database
    # =========================================================================
    database_url_override: str = Field(
        default="",
        alias="DATABASE_URL",
        description="Full SQLAlchemy async URL; takes precedence over db_* fields",
    )
    db_user: str = Field(
        default="portal_app",
        description="Database user",
    )
    db_password: str = Field(
        default="",
        description="Database password",
    )
    db_name: str = Field(
        default="portal",
        description="Database name",
    )
    db_host: str = Field(
        default="localhost",
        description="Database host",
    )
    db_port: int = Field(
        default=5432,
        description="Database port",
    )
    db_pool_size: int = Field(
        default=5,
        description="Database connection pool size",
    )
    db_pool_max_overflow: int = Field(
        default=10,
        description="Max overflow connections beyond pool size",
    )
    db_create_schema: bool = Field(
        default=False,
        description="Create missing tables on startup (local development only)",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Build the async database URL.

        An explicit DATABASE_URL wins; otherwise a PostgreSQL/asyncpg URL
        is assembled from the db_* fields.
        """
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    # =========================================================================
    # Authorization
    # =========================================================================
    admin_roles: list[str] = Field(
        default=["owner", "admin"],
        description="Roles allowed to mutate the taxonomy",
    )
    admin_permission: str = Field(
        default="taxonomy:manage",
        description="Permission that grants taxonomy admin regardless of role",
    )

    # =========================================================================
    # Cache revalidation
    # =========================================================================
    taxonomy_page_path: str = Field(
        default="/internal/product/taxonomy",
        description="Page path revalidated after every taxonomy mutation",
    )

    # =========================================================================
    # Taxonomy client
    # =========================================================================
    taxonomy_api_url: str = Field(
        default="http://localhost:8080",
        description="Base URL used by the editor's HTTP gateway",
    )
    taxonomy_api_timeout: float = Field(
        default=15.0,
        description="HTTP gateway request timeout in seconds",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Output logs as JSON",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for convenience
settings = get_settings()
