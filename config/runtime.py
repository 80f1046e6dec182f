"""Runtime configuration settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RuntimeConfig(BaseSettings):
    """Runtime configuration settings."""

    debug: bool = Field(False, alias="DEBUG")
    log_level: LogLevel = Field("WARNING", alias="LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def effective_log_level(self) -> str:
        """Level to configure logging with; ``DEBUG=1`` wins over ``LOG_LEVEL``."""
        return "DEBUG" if self.debug else self.log_level
