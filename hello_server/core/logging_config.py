"""
Server logging configuration.

- General server logs: {LOG_DIR}/app.log (and stdout)
- Per-request access logs: {LOG_DIR}/access.log (separate file)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from hello_server.core.config import get_settings


# Logger name used by the request logging middleware (has its own log file)
ACCESS_LOGGER_NAME = "server.access"

# Format for log messages
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(name: str) -> int:
    """Return the numeric level for a level name; unknown names fall back to INFO."""
    level = getattr(logging, name.upper(), logging.INFO)
    if not isinstance(level, int):
        return logging.INFO
    return level


def setup_logging(
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """
    Configure server logging at startup.

    - Creates log directory if it does not exist.
    - Root logger: writes to {log_dir}/app.log and to stdout.
    - Logger "server.access": writes only to {log_dir}/access.log (no propagation to root).

    **Input (request):**
        - log_dir: Directory for log files. Default from settings LOG_DIR (default "logs").
        - log_level: Level name (DEBUG, INFO, WARNING, ERROR). Default from settings LOG_LEVEL (default "INFO").

    **Output (response):** None.
    """
    settings = get_settings()
    dir_path = Path(log_dir or settings.LOG_DIR)
    dir_path.mkdir(parents=True, exist_ok=True)
    level = resolve_log_level(log_level or settings.LOG_LEVEL)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # ---- Root logger: app.log + console ----
    app_file_handler = logging.FileHandler(dir_path / "app.log", encoding="utf-8")
    app_file_handler.setLevel(level)
    app_file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates on reload
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
        h.close()
    root_logger.addHandler(app_file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # ---- Access logger: access.log only ----
    access_file_handler = logging.FileHandler(dir_path / "access.log", encoding="utf-8")
    access_file_handler.setLevel(level)
    access_file_handler.setFormatter(formatter)

    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    access_logger.setLevel(level)
    access_logger.propagate = False
    for h in access_logger.handlers[:]:
        access_logger.removeHandler(h)
        h.close()
    access_logger.addHandler(access_file_handler)
