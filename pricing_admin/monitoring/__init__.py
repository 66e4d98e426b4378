"""
Monitoring
Logging setup and logger factory
"""

from .logger import LoggerAdapter, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggerAdapter",
]
