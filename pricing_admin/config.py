"""
Configuration module
Reads environment variables into pydantic settings models
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(dotenv_path=".env", override=False)


class AdminAPIConfig(BaseSettings):
    """Admin REST backend settings"""

    base_url: str = Field(default="http://localhost:8080/api")
    token: Optional[str] = Field(default=None)
    timeout: float = Field(default=30.0, gt=0)
    # upper bound on per-entity custom field value requests in flight
    max_concurrency: int = Field(default=10, ge=1)

    model_config = SettingsConfigDict(env_prefix="ADMIN_API_", extra="ignore")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ServerConfig(BaseSettings):
    """Console view API server settings"""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_prefix="SERVER_", extra="ignore")


class Settings(BaseSettings):
    """Application settings"""

    # environment
    env: Literal["development", "staging", "production", "test"] = Field(default="development")
    debug: bool = Field(default=False)

    # logging
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)

    _admin_api: Optional[AdminAPIConfig] = None
    _server: Optional[ServerConfig] = None

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def admin_api(self) -> AdminAPIConfig:
        """Admin REST backend settings (lazy loading)"""
        if self._admin_api is None:
            self._admin_api = AdminAPIConfig()
        return self._admin_api

    @property
    def server(self) -> ServerConfig:
        """View API server settings (lazy loading)"""
        if self._server is None:
            self._server = ServerConfig()
        return self._server

    def is_production(self) -> bool:
        return self.env == "production"

    def is_development(self) -> bool:
        return self.env == "development"


@lru_cache()
def get_settings() -> Settings:
    """Return the settings singleton"""
    return Settings()


settings = get_settings()
