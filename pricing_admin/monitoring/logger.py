"""
Logging system
Loguru sinks and a context-bound logger facade
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    json_logs: bool = False,
    rotation: str = "100 MB",
    retention: int = 5,
    console_output: bool = True,
):
    """
    Initialize logging

    Args:
        log_level: minimum level
        log_file: log file path (no file sink when omitted)
        json_logs: serialize records as JSON
        rotation: file rotation threshold
        retention: number of rotated files kept
        console_output: write to stderr
    """
    logger.remove()

    level = log_level.upper()

    if console_output:
        if json_logs:
            logger.add(sys.stderr, level=level, format="{message}", serialize=True)
        else:
            logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_file),
            level=level,
            format="{message}" if json_logs else FILE_FORMAT,
            serialize=json_logs,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

        # errors also go to a separate file
        error_log = log_file.parent / f"{log_file.stem}_error{log_file.suffix}"
        logger.add(
            str(error_log),
            level="ERROR",
            format=FILE_FORMAT + "\n{exception}",
            rotation="1 day",
            retention="30 days",
            compression="zip",
        )


class LoggerAdapter:
    """Logger adapter carrying bound context"""

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.context = context or {}
        self._logger = logger.bind(name=name, **self.context)

    def bind(self, **kwargs) -> "LoggerAdapter":
        """Bind additional context"""
        new_context = {**self.context, **kwargs}
        return LoggerAdapter(self.name, new_context)

    def debug(self, message: str, **kwargs):
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self._logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self._logger.error(message, **kwargs)

    def exception(self, message: str, **kwargs):
        self._logger.exception(message, **kwargs)


def get_logger(name: str, **context) -> LoggerAdapter:
    """
    Create a logger

    Args:
        name: logger name
        **context: context values bound to every record

    Returns:
        LoggerAdapter instance
    """
    return LoggerAdapter(name, context)
