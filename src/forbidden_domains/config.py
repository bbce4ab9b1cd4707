from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    model_config = {"env_prefix": "FORBIDDEN_DOMAINS_"}

    # Logging (stderr only; stdout carries the verdicts)
    log_level: LogLevel = _defaults.get("log_level", "warning")
    log_json: bool = _defaults.get("log_json", True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _lowercase_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


settings = Settings()
