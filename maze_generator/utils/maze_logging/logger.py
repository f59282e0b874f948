"""
Logging infrastructure for maze_generator.

Provides structured logging with configurable levels, formatting, and
colored terminal output through colorlog.
"""

from __future__ import annotations

import logging
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MazeFormatter(logging.Formatter):
    """Formatter for maze_generator logging with optional colors and source location."""

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        self.use_colors = use_colors
        self.include_location = include_location

        format_str = LOG_FORMAT
        if self.include_location:
            format_str += " [%(filename)s:%(lineno)d]"

        if self.use_colors:
            self.colored_formatter = colorlog.ColoredFormatter(
                "%(log_color)s" + format_str,
                datefmt=DATE_FORMAT,
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "red,bg_white",
                },
            )

        super().__init__(format_str, datefmt=DATE_FORMAT)

    def format(self, record):
        if self.use_colors:
            return self.colored_formatter.format(record)
        else:
            return super().format(record)


class MazeLogger:
    """
    Central logging manager for maze_generator.

    Thread Safety:
        Logger creation uses double-check locking, so generators running in
        several threads can call get_logger() concurrently without
        installing duplicate handlers.

    Singleton Pattern:
        Uses __new__ to ensure only one instance manages global configuration.
    """

    _instance = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _log_level = logging.INFO
    _log_to_file = False
    _log_file_path: Path | None = None
    _use_colors = True
    _include_location = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def configure(
        cls,
        level: str | int = "INFO",
        log_to_file: bool = False,
        log_file_path: str | Path | None = None,
        use_colors: bool = True,
        include_location: bool = False,
    ):
        """
        Configure global logging settings for maze_generator.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_file: Whether to log to file
            log_file_path: Path to log file (optional)
            use_colors: Use colored terminal output
            include_location: Include file location in log messages
        """
        with cls._lock:
            if isinstance(level, str):
                cls._log_level = getattr(logging, level.upper())
            else:
                cls._log_level = level

            cls._log_to_file = log_to_file
            cls._use_colors = use_colors
            cls._include_location = include_location

            if log_to_file:
                if log_file_path is None:
                    log_dir = Path.cwd() / "logs"
                    log_dir.mkdir(exist_ok=True)
                    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                    cls._log_file_path = log_dir / f"maze_generator_{timestamp}.log"
                else:
                    cls._log_file_path = Path(log_file_path)
                    cls._log_file_path.parent.mkdir(parents=True, exist_ok=True)
            else:
                cls._log_file_path = None

            for logger in cls._loggers.values():
                cls._setup_logger(logger)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get or create a logger for the specified module.

        Args:
            name: Logger name (typically __name__ from calling module)

        Returns:
            Configured logger instance
        """
        if name in cls._loggers:
            return cls._loggers[name]

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)

                # Leave loggers configured by the host application alone
                if not logger.handlers:
                    cls._setup_logger(logger)

                cls._loggers[name] = logger

        return cls._loggers[name]

    @classmethod
    def _setup_logger(cls, logger: logging.Logger):
        """Configure individual logger with current settings."""
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(cls._log_level)

        formatter = MazeFormatter(use_colors=cls._use_colors, include_location=cls._include_location)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(cls._log_level)
        logger.addHandler(console_handler)

        if cls._log_to_file and cls._log_file_path:
            file_handler = logging.FileHandler(cls._log_file_path)
            # File logs never carry color codes
            file_formatter = MazeFormatter(use_colors=False, include_location=cls._include_location)
            file_handler.setFormatter(file_formatter)
            file_handler.setLevel(cls._log_level)
            logger.addHandler(file_handler)

        logger.propagate = False

    @classmethod
    def get_log_file_path(cls) -> Path | None:
        return cls._log_file_path


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger for the current module.

    Args:
        name: Logger name (if None, uses calling module name)

    Returns:
        Configured logger instance
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", "maze_generator")
        else:
            name = "maze_generator"

    return MazeLogger.get_logger(name)


def configure_logging(**kwargs):
    """
    Configure global logging settings.

    Keyword Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to file
        log_file_path: Path to log file
        use_colors: Use colored terminal output
        include_location: Include file location in messages
    """
    MazeLogger.configure(**kwargs)


def configure_development_logging(include_location: bool = True):
    """
    Configure logging for development and debugging: DEBUG level on the console.

    Args:
        include_location: Include file:line information
    """
    configure_logging(
        level="DEBUG",
        log_to_file=False,
        use_colors=True,
        include_location=include_location,
    )

    logger = get_logger("maze_generator.development")
    logger.debug("Development logging enabled - DEBUG level with full details")


def log_generation_start(logger: logging.Logger, generator_name: str, width: int, height: int, seed: int):
    """Log the start of a generation run."""
    logger.debug(f"{generator_name}: generating {width}x{height} maze (seed={seed})")


def log_generation_completion(
    logger: logging.Logger,
    generator_name: str,
    width: int,
    height: int,
    passage_count: int,
    goal: Any,
):
    """Log generation completion with a short summary."""
    logger.debug(
        f"{generator_name}: finished {width}x{height} maze - passages: {passage_count}, goal: {goal}"
    )


def log_validation_error(logger: logging.Logger, component: str, error_msg: str, suggestion: str | None = None):
    """Log validation errors with suggestions."""
    logger.warning(f"Validation error in {component}: {error_msg}")
    if suggestion:
        logger.info(f"Suggestion: {suggestion}")
