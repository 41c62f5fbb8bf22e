# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a logging system that records what happens in the app in a structured way,
# so every line written while serving a request can be traced back to that request.

# 🧪 Purpose (Technical Summary):
# Configures root logging with python-json-logger JSON output (or a plain text fallback format
# selected by settings), injecting the per-request id held in a ContextVar into every record.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: app.main (startup), request logging and error handling middleware (request id)

import logging
import socket
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

# Context variable for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

SERVICE_NAME = 'user-records-api'

_logging_configured = False


class RequestContextFilter(logging.Filter):
    """Attach the current request id, service name and host to every record."""

    def __init__(self):
        super().__init__()
        self.hostname = socket.gethostname()

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('')
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        return True


class ContextualFormatter(logging.Formatter):
    """Plain text formatter that prefixes the request id when one is set."""

    def format(self, record):
        request_id = getattr(record, 'request_id', '')
        record.request_tag = f" [{request_id}]" if request_id else ''
        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs one JSON object per line with a UTC timestamp, level and
    logger name, plus any ``extra=`` fields passed at the call site.
    """

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        if not log_record.get('request_id'):
            log_record.pop('request_id', None)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_console: bool = True,
    force: bool = False
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Level name, defaults to settings.LOG_LEVEL
        log_format: 'json' or 'text', defaults to settings.LOG_FORMAT
        enable_console: Attach a stdout handler
        force: Reconfigure even if logging was already set up

    Returns:
        logging.Logger: The startup logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter(
            '%(message)s %(request_id)s %(service)s %(hostname)s %(module)s %(funcName)s %(lineno)d'
        )
    else:
        formatter = ContextualFormatter(
            '%(asctime)s - %(name)s - %(levelname)s%(request_tag)s - %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(RequestContextFilter())
        root_logger.addHandler(console_handler)

    # Quiet down noisy libraries
    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DB_ECHO else logging.WARNING
    )
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")
