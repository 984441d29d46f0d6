"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `NAVLETTER_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BodyFont = Literal["times", "courier"]
HeaderType = Literal["USMC", "DON"]

MAX_PARAGRAPH_LEVEL = 8


class Settings(BaseSettings):
    """navletter settings.

    All fields are environment-configurable. Prefix is `NAVLETTER_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAVLETTER_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    log_level: str = Field(default="INFO")

    # Rendering
    body_font: BodyFont = Field(default="times")
    # SECNAV M-5216.5 limits a subject line to 57 characters
    subject_max_line_length: int = Field(default=57, ge=10, le=120)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("NAVLETTER_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
