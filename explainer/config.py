"""Runtime configuration, read from the environment or a ``.env`` file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

	# Empty secret rejects every request
	shared_secret: str = Field(default="", validation_alias="SHARED_SECRET")
	host: str = Field(default="127.0.0.1", validation_alias="EXPLAINER_HOST")
	port: int = Field(default=8000, validation_alias="EXPLAINER_PORT")
	log_level: str = Field(default="INFO", validation_alias="EXPLAINER_LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
	return Settings()
