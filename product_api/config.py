# product_api/config.py
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Service settings, read from the environment (or a .env file)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Store. DATABASE_URL wins when set (containerized runs), otherwise the
    # URL is built from the APP_DB_* variables.
    database_url: Optional[str] = Field(None, validation_alias="DATABASE_URL")
    db_username: str = Field("postgres", validation_alias="APP_DB_USERNAME")
    db_password: str = Field("", validation_alias="APP_DB_PASSWORD")
    db_name: str = Field("postgres", validation_alias="APP_DB_NAME")
    db_host: str = Field("localhost", validation_alias="APP_DB_HOST")
    db_port: int = Field(5432, validation_alias="APP_DB_PORT")

    # HTTP
    host: str = Field("0.0.0.0", validation_alias="APP_HOST")
    port: int = Field(8010, validation_alias="APP_PORT")

    # Observability
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    sql_echo: bool = Field(False, validation_alias="SQL_ECHO")

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v):
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    @model_validator(mode="after")
    def build_database_url(self) -> "Settings":
        if self.database_url is None:
            self.database_url = URL.create(
                "postgresql+asyncpg",
                username=self.db_username,
                password=self.db_password or None,
                host=self.db_host,
                port=self.db_port,
                database=self.db_name,
            ).render_as_string(hide_password=False)
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
