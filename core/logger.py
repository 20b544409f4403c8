"""
Service Logger Setup

Configures the root logger of a microservice from LoggingConfig.
Modules keep using logging.getLogger(__name__); this only attaches handlers
and levels once per process.

Usage:
    from core.logger import setup_service_logger

    logger = setup_service_logger("personnel_service", level="INFO")
"""

import logging
import sys
from typing import Optional

from core.config import LoggingConfig

_configured = False


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure logging for a service and return its logger

    Args:
        service_name: Logger name for the service
        level: Log level override (defaults to config.log_level)
        config: Logging config (defaults to LoggingConfig.from_env())

    Returns:
        The service logger
    """
    global _configured

    if config is None:
        config = LoggingConfig.from_env()
    log_level = (level or config.log_level).upper()

    root = logging.getLogger()
    if not _configured:
        formatter = logging.Formatter(config.log_format)

        if config.enable_console:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            root.addHandler(console)

        if config.log_file:
            file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        _configured = True

    root.setLevel(log_level)

    logger = logging.getLogger(service_name)
    logger.setLevel(log_level)
    return logger


__all__ = ["setup_service_logger"]
