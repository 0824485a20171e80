"""Configuration for cluster_uri loaded from environment variables."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import configure_logging
from .models import ParseOptions


class ParserSettings(BaseSettings):
    """Parser and logging settings.

    Every field can be set through a ``CLUSTER_URI_``-prefixed environment
    variable, e.g. ``CLUSTER_URI_DECODE_FRAGMENT=true``.
    """

    model_config = SettingsConfigDict(env_prefix="CLUSTER_URI_", case_sensitive=False)

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)
    decode_fragment: bool = Field(default=False)
    conditional_authority_marker: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    def to_options(self) -> ParseOptions:
        return ParseOptions(
            decode_fragment=self.decode_fragment,
            conditional_authority_marker=self.conditional_authority_marker,
        )

    def apply_logging(self) -> None:
        configure_logging(self.log_level, self.log_json)


def get_settings() -> ParserSettings:
    """Load settings from the current environment."""
    return ParserSettings()


__all__ = ["ParserSettings", "get_settings"]
