from datetime import datetime

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Schedula"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    BUSINESS_TIMEZONE: str = "America/Los_Angeles"

    # "sql" | "memory"; unset means memory when ENV is test, sql otherwise
    STORE_PROVIDER: str | None = None
    DATABASE_URL: str = "sqlite:///./schedula.db"

    # Pins "now" for demos, e.g. 2025-07-05T12:00:00. Unset means wall clock.
    ANCHOR_DATETIME: datetime | None = None
    DATE_PARSER_JULY_ONLY: bool = False

    SESSION_TTL_SECONDS: float = 1800.0
    SESSION_MAX_ENTRIES: int = 1000


settings = Settings()
