from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from WEBDOC_* environment variables (or .env)."""

    DEFAULT_PARAM_TYPE: str = Field(
        default="string",
        description="Type recorded for URL parameters that were not documented explicitly.",
    )

    DOC_ROUTE: str = Field(
        default="/_doc",
        description="Path used by Router.add_doc_route() when no path is given.",
    )

    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Level applied by the CLI to the 'webdoc' logger.",
    )

    model_config = SettingsConfigDict(
        env_prefix="WEBDOC_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("DEFAULT_PARAM_TYPE")
    @classmethod
    def non_empty_param_type(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("DEFAULT_PARAM_TYPE must not be empty")
        return v

    @field_validator("DOC_ROUTE")
    @classmethod
    def normalize_doc_route(cls, v: str) -> str:
        v = "/" + v.strip().strip("/")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return v

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
