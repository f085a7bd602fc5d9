"""Logging setup.

Loguru's default sink writes to stderr, which would scribble over the curses
screen, so the terminal front end removes it and logs to a file only when
asked to.
"""

from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} - {message}"


def configure_logging(log_file: Optional[str] = None, level: str = "INFO") -> None:
    logger.remove()
    if log_file:
        logger.add(log_file, level=level.upper(), format=LOG_FORMAT)
