from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the board CLI and interactive board.

    Values are loaded from environment variables and `.env`.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Board file used when a command gets no --file
    AAC_BOARD_FILE: Path = Field(default=Path("data/board.txt"))

    # Logging
    AAC_LOG_LEVEL: str = Field(default="INFO")
    # Console logging is always on; the rotating file is opt-in.
    AAC_LOG_TO_FILE: bool = Field(default=False)
    AAC_LOG_DIR: Path = Field(default=Path("_logs"))
    # Timed rotation retention count (days). Old log files are auto-deleted.
    AAC_LOG_BACKUP_COUNT: int = Field(default=14)


def load_settings() -> Settings:
    return Settings()
