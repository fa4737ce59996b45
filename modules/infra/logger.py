"""Logging infrastructure for the application.

Provides centralized logger configuration with file and console handlers.
"""

from __future__ import annotations

import logging
from pathlib import Path

from modules.config.config_loader import PROJECT_ROOT
from modules.config.service import get_config_service


def _resolve_log_file() -> Path:
    """Return the log file path configured under general.logs_dir.

    A value ending in .log names the file itself; anything else names the
    directory that will hold application.log.
    """
    try:
        general = get_config_service().get_general_config()
        logs_dir_value = general.get("logs_dir")
    except (FileNotFoundError, ValueError):
        logs_dir_value = None

    if not logs_dir_value:
        return PROJECT_ROOT / "logs" / "application.log"

    logs_path = Path(logs_dir_value)
    if not logs_path.is_absolute():
        logs_path = (PROJECT_ROOT / logs_path).resolve()
    if logs_path.suffix == ".log":
        return logs_path
    return logs_path / "application.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Set up and return a logger with file and console handlers.

    Logs are written to the configured logs directory (from probe_config.yaml)
    or PROJECT_ROOT/logs as a fallback. Console handler only shows warnings
    and errors, while the file handler captures all INFO level and above.

    Args:
        name: Name of the logger (typically __name__ from the calling module).

    Returns:
        Configured logger instance.
    """
    log_file = _resolve_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        # Add a console handler that only outputs warnings and errors.
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_formatter = logging.Formatter("%(levelname)s: %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
    return logger
