import logging
from pathlib import Path
from typing import Optional

import structlog

from weather_app.config.config import get_config


class CustomFormatter(logging.Formatter):
    """Custom formatter that implements the required format: [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}"""

    def format(self, record):
        # Extract class name from the logger name
        class_name = record.name.split('.')[-1] if '.' in record.name else record.name

        # Format timestamp as yyyy-mm-dd hh:mm:ss
        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{class_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def get_log_file_path(log_file: Optional[str] = None) -> Optional[Path]:
    """Get the log file path, creating its directory if needed."""
    log_file = log_file or get_config().log_file
    if not log_file:
        return None

    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def configure_structlog(log_format: Optional[str] = None):
    """Route structlog events through the standard library loggers."""
    log_format = log_format or get_config().log_format
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure logging for the application.

    Logs go to stderr, stdout is reserved for the weather report. When a log
    file is configured, records are written there as well. Format:
    [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}
    """
    log_level = getattr(logging, (level or get_config().log_level).upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = get_log_file_path(log_file)
    if log_file_path is not None:
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Quiet transport libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    configure_structlog()

    logger = structlog.get_logger(__name__)
    logger.debug("Logging configured", level=logging.getLevelName(log_level), log_file=str(log_file_path))
