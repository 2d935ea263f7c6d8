from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_log_dir(settings: object) -> Path:
    """Resolve the log directory.

    - If AAC_LOG_DIR is absolute, use it directly.
    - Otherwise, treat it as relative to the current working directory.
    """

    raw = getattr(settings, "AAC_LOG_DIR", Path("_logs"))
    p = raw if isinstance(raw, Path) else Path(str(raw))
    if p.is_absolute():
        return p
    return Path.cwd() / p


def setup_logging(settings: object) -> Path | None:
    """Configure root logging for the CLI.

    Always logs to stderr. When `AAC_LOG_TO_FILE` is set, also writes a
    daily-rotated `aac_board.log` under `AAC_LOG_DIR`, keeping the last
    `AAC_LOG_BACKUP_COUNT` files.

    Returns the log file path, or None when file logging is off. Safe to
    call more than once (it resets handlers).
    """

    level_name = str(getattr(settings, "AAC_LOG_LEVEL", "INFO") or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Reset root handlers so repeated setup does not duplicate lines.
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level)
    root.addHandler(console_handler)

    log_file: Path | None = None
    if bool(getattr(settings, "AAC_LOG_TO_FILE", False)):
        log_dir = _resolve_log_dir(settings)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "aac_board.log"

        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=max(0, int(getattr(settings, "AAC_LOG_BACKUP_COUNT", 14) or 0)),
            encoding="utf-8",
            utc=False,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("aac_board").debug(
        "aac_board logging enabled (file=%s, level=%s)",
        os.fspath(log_file) if log_file else None,
        level_name,
    )
    return log_file
