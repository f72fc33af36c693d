"""Logging configuration for the migrator system."""

import logging
import logging.handlers
import sys
from pathlib import Path

import colorlog

from .config import Settings, settings

LOG_FORMAT = "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
COLOR_LOG_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
    "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m"
)
DATE_FORMAT = "%m-%d %H:%M:%S"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def setup_logging(
    level: int = logging.INFO,
    use_colors: bool = True,
    enable_file_logging: bool = False,
    log_dir: Path | None = None,
    is_test_env: bool = False,
) -> None:
    """Configure logging for the migrator system.

    Args:
        level: Logging level to use
        use_colors: Whether to use colored output for console
        enable_file_logging: Whether to also log to a file
        log_dir: Directory for log files (defaults to ./logs or ./logs/test)
        is_test_env: Whether this is a test environment
    """
    handlers = [_console_handler(use_colors)]

    if enable_file_logging:
        if log_dir is None:
            log_dir = Path("logs", "test") if is_test_env else Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_file_handler(log_dir, is_test_env))

    logging.basicConfig(level=level, handlers=handlers, force=True)


def _console_handler(use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    formatter: logging.Formatter
    if use_colors:
        formatter = colorlog.ColoredFormatter(
            COLOR_LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors=LOG_COLORS,
            style="%",
        )
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_dir: Path, is_test_env: bool) -> logging.Handler:
    handler: logging.Handler
    if is_test_env:
        handler = logging.FileHandler(log_dir / "test.log", mode="w")
    else:
        handler = logging.handlers.RotatingFileHandler(
            log_dir / "migrator.log",
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=4,
            encoding="utf-8",
        )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def setup_production_logging(
    level: int = logging.INFO, log_dir: Path | None = None
) -> None:
    """Setup logging for production with a rotating log file."""
    setup_logging(
        level=level, enable_file_logging=True, log_dir=log_dir, is_test_env=False
    )


def setup_test_logging(level: int = logging.DEBUG, log_dir: Path | None = None) -> None:
    """Setup logging for tests, overwriting the test log file."""
    setup_logging(
        level=level, enable_file_logging=True, log_dir=log_dir, is_test_env=True
    )


def configure_logging(
    app_settings: Settings | None = None, log_dir: Path | None = None
) -> None:
    """Configure logging from application settings.

    Testing overwrites the test log and production always keeps a rotating
    log file. Development writes a file only when ``log_to_file`` is set.

    Args:
        app_settings: Settings to apply (defaults to the global settings)
        log_dir: Directory for log files (defaults to ./logs or ./logs/test)
    """
    app_settings = app_settings or settings
    level = app_settings.log_level_value

    if app_settings.is_testing:
        setup_test_logging(level, log_dir=log_dir)
    elif app_settings.is_production:
        setup_production_logging(level, log_dir=log_dir)
    else:
        setup_logging(
            level=level, enable_file_logging=app_settings.log_to_file, log_dir=log_dir
        )

    get_logger(__name__).info(
        f"migrator {app_settings.version} logging configured "
        f"for {app_settings.environment.value}"
    )
