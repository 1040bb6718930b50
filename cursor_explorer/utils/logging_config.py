"""
Logging Configuration using dictConfig
Declarative, centralized logging setup for the append-only event log
"""

import json
import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRIBUTES = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName'
}


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'name': record.name,
            'level': record.levelname,
            'message': record.getMessage(),
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def get_logging_config(
    log_dir: Path,
    log_file: str = 'cursor_explorer.log',
    level: str = 'INFO',
    json_format: bool = False,
    console: bool = False
) -> Dict[str, Any]:
    """
    Generate logging configuration dictionary

    Args:
        log_dir: Directory for the log file
        log_file: Log file name inside log_dir
        level: Default logging level
        json_format: Use JSON formatting for the log file
        console: Also log to stderr

    Returns:
        Logging configuration dictionary for dictConfig
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    file_formatter = 'json' if json_format else 'detailed'

    config = {
        'version': 1,
        'disable_existing_loggers': False,

        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'detailed': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'json': {
                '()': 'cursor_explorer.utils.logging_config.JsonFormatter'
            }
        },

        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
                'formatter': 'default',
                'level': 'INFO'
            },

            # Append-only event log
            'event_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'filename': str(log_dir / log_file),
                'mode': 'a',
                'maxBytes': 10 * 1024 * 1024,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8',
                'errors': 'backslashreplace',
                'formatter': file_formatter,
                'level': 'DEBUG'
            }
        },

        'loggers': {
            'cursor_explorer': {
                'handlers': ['event_file'],
                'level': level,
                'propagate': False
            }
        },

        'root': {
            'handlers': ['event_file'],
            'level': 'WARNING'
        }
    }

    if console:
        config['loggers']['cursor_explorer']['handlers'].insert(0, 'console')

    return config


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    log_file: str = 'cursor_explorer.log',
    level: str = 'INFO',
    json_format: bool = False,
    console: bool = False
):
    """
    Initialize logging for the application

    Args:
        log_dir: Directory for the log file (defaults to the working directory)
        log_file: Log file name
        level: Logging level
        json_format: Use JSON formatting
        console: Also log to stderr
    """
    if log_dir is None:
        log_dir = Path('.')

    config = get_logging_config(
        log_dir=Path(log_dir),
        log_file=log_file,
        level=level,
        json_format=json_format,
        console=console
    )

    logging.config.dictConfig(config)

    logger = logging.getLogger('cursor_explorer')
    logger.info("Application initialized")
