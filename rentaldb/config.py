"""Application configuration via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "RentalDB"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Database
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_user: str = "root"
    mysql_password: str = Field(default="")
    mysql_db: str = "airbnbSystem"
    sql_echo: bool = False

    # Full SQLAlchemy URL; takes precedence over the mysql_* fields
    sqlalchemy_url: Optional[str] = None

    @computed_field
    @property
    def database_url(self) -> str:
        """SQLAlchemy connection URL for the booking database."""
        if self.sqlalchemy_url:
            return self.sqlalchemy_url
        return self._mysql_url(self.mysql_db)

    @computed_field
    @property
    def server_url(self) -> str:
        """MySQL server URL without a database, used to drop and create it."""
        return self._mysql_url(None)

    def _mysql_url(self, database: str | None) -> str:
        url = URL.create(
            "mysql+pymysql",
            username=self.mysql_user,
            password=self.mysql_password or None,
            host=self.mysql_host,
            port=self.mysql_port,
            database=database,
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
