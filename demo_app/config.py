import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Node.js Demo App", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=DEFAULT_PORT, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    enable_metrics_endpoint: bool = Field(default=False, alias="ENABLE_METRICS_ENDPOINT")
    unmetered_paths: list[str] = Field(default_factory=lambda: ["/api/metrics"], alias="UNMETERED_PATHS")

    @field_validator("port", mode="before")
    @classmethod
    def _port_or_default(cls, value: Any) -> int:
        # Unset, blank or garbage PORT values fall back rather than abort startup.
        try:
            port = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 <= port <= 65535:
            return DEFAULT_PORT
        return port

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: Any) -> str:
        name = str(value or "").strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            return "INFO"
        return name

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
