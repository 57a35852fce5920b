"""
Logging Utilities

Centralized logging configuration for the planner.

Usage:
    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.info("Plan built")
"""

import logging
import logging.config

from config import LOGGING_CONFIG

_configured = False


def setup_logging():
    """
    Initialize logging configuration once.

    Idempotent - safe to call from every module.
    """
    global _configured
    if _configured:
        return
    logging.config.dictConfig(LOGGING_CONFIG)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for module.

    Args:
        name: Module name (use __name__)

    Returns:
        Configured logger instance
    """
    setup_logging()
    return logging.getLogger(name)
