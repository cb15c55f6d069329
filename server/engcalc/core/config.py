from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    api_title: str = "Engineering Calculator API"
    api_version: str = "0.1.0"
    log_level: str = "INFO"

    calc_mode: str = "local"  # local | http
    calc_http_base_url: str | None = None
    calc_http_timeout_sec: float = 5.0
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
        ]
    )
    frontend_origin: str | None = Field(default=None, alias="FRONTEND_ORIGIN")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def resolved_cors_origins(self) -> List[str]:
        """
        Returns the configured CORS origins plus the optional frontend origin, deduped.
        """
        normalized: list[str] = []

        def _append(origin: str | None) -> None:
            if not origin:
                return
            cleaned = origin.rstrip("/")
            if cleaned not in normalized:
                normalized.append(cleaned)

        for origin in self.cors_origins:
            _append(origin)

        _append(self.frontend_origin)
        return normalized

    @property
    def uses_remote_calculator(self) -> bool:
        return (self.calc_mode or "local").lower() == "http"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
