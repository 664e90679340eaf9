# playstore/config.py
"""
Runtime configuration, loaded from environment variables (and an optional
.env file in the working directory) with pydantic-settings.

    from playstore.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import Optional, Sequence

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    # HTTP server
    APP_HOST: str = Field(default="0.0.0.0", description="Address to bind")
    APP_PORT: int = Field(default=DEFAULT_PORT, ge=1, le=65535)

    # MySQL connection
    DB_HOST: str = "localhost"
    DB_PORT: int = Field(default=3306, ge=1, le=65535)
    DB_USER: str = Field(..., description="Database user (required)")
    DB_PW: SecretStr = Field(..., description="Database password (required)")
    DB_NAME: str = "playstore"
    DB_CONNECTION_LIMIT: int = Field(default=4, ge=1, description="Pool size")
    DB_TIMEZONE: str = Field(
        default="+08:00",
        description="Session time_zone applied to every MySQL connection",
    )
    DB_URL: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the DB_* connection settings",
    )

    EXPOSE_ERROR_DETAILS: bool = Field(
        default=False,
        description="Send raw database errors to the client on the category listing",
    )
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def database_url(self) -> URL:
        if self.DB_URL:
            return make_url(self.DB_URL)
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PW.get_secret_value(),
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def resolve_port(argv: Sequence[str], settings: Settings) -> int:
    """
    Pick the listen port: first CLI argument, then APP_PORT, then 3000.

    A CLI argument that is not a positive integer is ignored.
    """
    if argv:
        try:
            port = int(argv[0])
        except ValueError:
            port = 0
        if port > 0:
            return port
    return settings.APP_PORT or DEFAULT_PORT
