"""
Runtime configuration for the edsign command line and logging.

The signing core itself reads none of this; its behavior is fixed.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

LOG_LEVEL_ENV = "EDSIGN_LOG_LEVEL"
LOG_FORMAT_ENV = "EDSIGN_LOG_FORMAT"
OUTPUT_ENCODING_ENV = "EDSIGN_OUTPUT_ENCODING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")
OUTPUT_ENCODINGS = ("hex", "b64url")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str = "console"
    output_encoding: str = "hex"


def _choice(name: str, allowed: tuple[str, ...], default: str, upper: bool = False) -> str:
    value = os.getenv(name, default).strip()
    value = value.upper() if upper else value.lower()
    return value if value in allowed else default


def load_settings(dotenv: bool = True) -> Settings:
    """Read settings from the environment, after loading .env from the working directory."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        log_level=_choice(LOG_LEVEL_ENV, LOG_LEVELS, Settings.log_level, upper=True),
        log_format=_choice(LOG_FORMAT_ENV, LOG_FORMATS, Settings.log_format),
        output_encoding=_choice(OUTPUT_ENCODING_ENV, OUTPUT_ENCODINGS, Settings.output_encoding),
    )
