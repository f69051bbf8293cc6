"""Shared logging configuration for rowshift."""

import logging
from datetime import datetime

from .settings import AppSettings, get_settings_dir

# Global logger instance
_logger = None

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(settings=None):
    """Get or create the logger instance.

    Args:
        settings: Optional AppSettings; read for level and file logging on
            first call only.
    """
    global _logger

    if _logger is not None:
        return _logger

    try:
        if settings is None:
            settings = AppSettings()
        level = getattr(logging, settings.get_log_level())

        formatter = logging.Formatter(LOG_FORMAT)
        handlers = [logging.StreamHandler()]

        if settings.get_log_to_file():
            log_dir = get_settings_dir() / "logs"
            log_dir.mkdir(parents=True, exist_ok=True)

            # Create log file with timestamp
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_dir / f"rowshift_{timestamp}.log"
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

        _logger = logging.getLogger("RowShift")
        _logger.setLevel(level)
        for handler in handlers:
            handler.setFormatter(formatter)
            _logger.addHandler(handler)

        return _logger

    except Exception as e:
        print(f"Failed to setup logging: {e}")
        import traceback
        traceback.print_exc()

        # Return a basic logger if setup fails
        _logger = logging.getLogger("RowShift")
        return _logger


def set_level(level):
    """Change the level of the shared logger (e.g. from a --verbose flag)."""
    get_logger().setLevel(level)


# Initialize logger on import
logger = get_logger()
