"""
Authenticator Bridge Logging Configuration

Configures logging based on environment variables:
- AUTHENTICATOR_DEBUG: Enable debug logging (default: false)
- AUTHENTICATOR_LOG_FILE: Optional log file path (default: stderr only)

Stdout carries protocol frames, so no handler here ever writes to it.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from authenticator_mcp.configs.constants import DEBUG_ENV_VAR, LOG_FILE_ENV_VAR

ROOT_LOGGER_NAME = "authenticator"


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the bridge.

    Args:
        debug: Enable debug level. Defaults to AUTHENTICATOR_DEBUG env var.
        log_file: Log file path. Defaults to AUTHENTICATOR_LOG_FILE env var.
                  When unset, logs go to stderr only.

    Returns:
        Root logger for the bridge
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV_VAR) or None

    level = logging.DEBUG if debug else logging.INFO

    # Create formatter with component tags
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Clear existing handlers
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        # If logging to file, only show warnings on stderr
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_path}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "backend", "router", "bridge")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")
