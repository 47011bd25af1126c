"""
Logging setup for the configuring app, the widget renderer and scripts.

Both processes write through loguru.  Every record carries the app group
it belongs to, so logs from the two sides of the shared store can be
told apart when they end up in the same file.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from app.core.config import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[app_group]}</magenta> | "
    "<cyan>{file.name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[app_group]} | {file.name}:{line} - {message}"


def setup_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Replace loguru's handlers with a console sink and an optional file sink.

    Args:
        level: Minimum level; ``settings.LOG_LEVEL`` when omitted.
        log_file: Log file path; ``settings.LOG_FILE`` when omitted.
            No file sink if both are empty.
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_file = log_file or settings.LOG_FILE

    handlers: list[dict] = [
        {"sink": sys.stderr, "format": CONSOLE_FORMAT, "level": level, "colorize": True},
    ]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append({
            "sink": log_path,
            "format": FILE_FORMAT,
            "level": level,
            "rotation": "1 MB",
            "retention": 3,
            "encoding": "utf-8",
        })

    logger.configure(handlers=handlers, extra={"app_group": settings.APP_GROUP_ID})
    logger.debug(f"Logging initialized (level={level}, file={log_file or '-'})")
