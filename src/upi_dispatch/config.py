"""Settings loaded from the environment and an optional .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from upi_dispatch.application.use_cases.initiate_payment import (
    DEFAULT_CHOOSER_TITLE,
    DEFAULT_NO_HANDLER_MESSAGE,
)
from upi_dispatch.domain.value_objects import CorrelationToken
from upi_dispatch.domain.value_objects.correlation_token import DEFAULT_REQUEST_CODE

DEFAULT_LOG_LEVEL = "INFO"


def _clean_env_value(value: str | None, default: str) -> str:
    if value is None:
        return default
    return value.strip().strip('"').strip("'") or default


def _parse_int(value: str | None, default: int) -> int:
    cleaned = _clean_env_value(value, "")
    if not cleaned:
        return default
    try:
        return int(cleaned)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    request_code: int
    chooser_title: str
    no_handler_message: str
    log_level: str

    def correlation_token(self) -> CorrelationToken:
        """Raises InvalidCorrelationTokenError if request_code is out of range."""
        return CorrelationToken(value=self.request_code)


def load_settings(env_file: Path | None = None) -> Settings:
    """Read settings from os.environ after loading env_file (default ./.env).

    Variables already set in the process environment win over the file.
    """
    load_dotenv(env_file if env_file is not None else Path.cwd() / ".env")

    return Settings(
        request_code=_parse_int(os.getenv("UPI_DISPATCH_REQUEST_CODE"), DEFAULT_REQUEST_CODE),
        chooser_title=_clean_env_value(
            os.getenv("UPI_DISPATCH_CHOOSER_TITLE"), DEFAULT_CHOOSER_TITLE
        ),
        no_handler_message=_clean_env_value(
            os.getenv("UPI_DISPATCH_NO_HANDLER_MESSAGE"), DEFAULT_NO_HANDLER_MESSAGE
        ),
        log_level=_clean_env_value(os.getenv("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
    )
