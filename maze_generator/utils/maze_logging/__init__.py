"""
Logging utilities for maze_generator.

Usage:
    >>> from maze_generator.utils.maze_logging import get_logger, configure_logging
    >>> logger = get_logger(__name__)
    >>> configure_logging(level="DEBUG")
    >>> logger.debug("Carving passages...")
"""

from __future__ import annotations

from .logger import (
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    get_logger,
    log_generation_completion,
    log_generation_start,
    log_validation_error,
)

__all__ = [
    # Core logging
    "configure_logging",
    "get_logger",
    # Environment configurations
    "configure_development_logging",
    # Structured logging helpers
    "log_generation_completion",
    "log_generation_start",
    "log_validation_error",
    # Classes
    "MazeFormatter",
    "MazeLogger",
]
