"""
Configuration management for Album Collector
"""

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ALBUM_COLLECTOR_ENVIRONMENT", "ENVIRONMENT"),
    )
    debug: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"

    # Database
    # Unset means a local PostgreSQL database named after the environment
    database_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ALBUM_COLLECTOR_DATABASE_URL", "DATABASE_URL"),
    )
    database_pool_size: int = 10
    database_max_overflow: int = 20
    auto_create_schema: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("ALBUM_COLLECTOR_API_PORT", "PORT"),
    )
    graphql_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphiql: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ALBUM_COLLECTOR_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def default_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = f"postgresql://localhost/album_collector_{self.environment}"
        return self


# Global settings instance
settings = Settings()
