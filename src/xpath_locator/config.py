"""
Configuration and Logging Setup

Provides centralized configuration and logging for the locator subsystem.
Reads LOG_LEVEL and resolver limits from environment variables.

Usage:
    from xpath_locator.config import configure_logging, get_logger, ResolverConfig

    # Configure at application startup
    configure_logging()

    # Get logger in any module
    logger = get_logger(__name__)

    # Resolver limits from XPATH_* environment variables
    config = ResolverConfig.from_env()
"""

import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()

# Default configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s: %(message)s"

DEFAULT_MAX_FRAME_DEPTH = 32
DEFAULT_AMBIENT_GLOBAL = "all"

# Valid log levels
VALID_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class ResolverConfig(BaseModel):
    """Limits and names used by the frame-aware resolver.

    Validation Rules:
    - max_frame_depth must be >= 1
    - ambient_global must be a non-empty identifier
    """

    max_frame_depth: int = Field(default=DEFAULT_MAX_FRAME_DEPTH, ge=1)
    """Maximum number of '/content:' hops followed in a single resolution."""

    ambient_global: str = Field(default=DEFAULT_AMBIENT_GLOBAL, min_length=1)
    """Name of the host global saved and restored around each evaluation."""

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """
        Create ResolverConfig from environment variables.

        Environment variables:
            XPATH_MAX_FRAME_DEPTH: int (default: 32)
            XPATH_AMBIENT_GLOBAL: str (default: all)
        """
        return cls(
            max_frame_depth=int(os.getenv("XPATH_MAX_FRAME_DEPTH", str(DEFAULT_MAX_FRAME_DEPTH))),
            ambient_global=os.getenv("XPATH_AMBIENT_GLOBAL", DEFAULT_AMBIENT_GLOBAL),
        )


def get_log_level() -> int:
    """
    Get the log level from LOG_LEVEL environment variable.

    Returns:
        Logging level constant (e.g., logging.INFO)

    Supported values:
        DEBUG, INFO, WARNING, ERROR, CRITICAL
    """
    level_str = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    if level_str not in VALID_LEVELS:
        # Warn about invalid level and use default
        print(
            f"Warning: Invalid LOG_LEVEL '{level_str}'. "
            f"Valid values: {', '.join(VALID_LEVELS.keys())}. "
            f"Using {DEFAULT_LOG_LEVEL}.",
            file=sys.stderr,
        )
        return VALID_LEVELS[DEFAULT_LOG_LEVEL]

    return VALID_LEVELS[level_str]


def configure_logging(
    level: Optional[int] = None,
    verbose: bool = False,
) -> None:
    """
    Configure logging for the locator subsystem.

    Args:
        level: Override log level (default: from LOG_LEVEL env var)
        verbose: Use detailed format with timestamps (default: simple format)

    Environment Variables:
        LOG_LEVEL: Set to DEBUG, INFO, WARNING, ERROR, or CRITICAL
    """
    if level is None:
        level = get_log_level()

    log_format = LOG_FORMAT if verbose else LOG_FORMAT_SIMPLE

    logging.basicConfig(
        level=level,
        format=log_format,
        stream=sys.stderr,
        force=True,  # Override any existing configuration
    )

    logging.getLogger("xpath_locator").setLevel(level)

    # Quiet noisy third-party loggers in non-debug mode
    if level > logging.DEBUG:
        logging.getLogger("playwright").setLevel(logging.WARNING)
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
