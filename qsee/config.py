"""Configuration settings for qsee.

Values come from environment variables prefixed with ``QSEE_`` or from a
``.env`` file in the working directory.
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="QSEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Input served by the HTTP API
    input_file: str | None = Field(default=None, description="Input file parsed at startup")
    case_sensitive_keys: str = Field(
        default="BASIS.BASIS",
        description="Comma-separated keys whose values keep their case",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_allowed_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    @property
    def case_sensitive_keys_list(self) -> list[str]:
        return [k.strip() for k in self.case_sensitive_keys.split(",") if k.strip()]

    @property
    def cors_origins_list(self) -> list[str]:
        if self.cors_allowed_origins == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for the CLI and server entry points."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
