# trading_bff/core/logging_config.py
"""
Centralized logging configuration for the package.

Quiets the HTTP client loggers while keeping trading_bff logs visible.
"""

import logging
import os
from typing import Optional


def configure_logging(level: Optional[str] = None):
    """
    Configure logging for the application.

    - trading_bff code: INFO (or whatever LOG_LEVEL says)
    - HTTP clients (httpx, httpcore): WARNING only
    """

    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    resolved = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=resolved,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Quiet noisy HTTP client loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("trading_bff").setLevel(resolved)
    logging.getLogger("__main__").setLevel(resolved)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at level: {log_level}")
    return log_level
