"""
Structured logging setup built on structlog and the standard logging module.
"""

import logging
import os
from typing import Optional

import structlog


class StructuredLogger:
    """Structured logging setup for the application"""

    def __init__(self, service_name: str = "buildledger", level: Optional[str] = None):
        self.service_name = service_name
        self.environment = os.getenv("APP_ENVIRONMENT", "development")
        self.level = (level or os.getenv("APP_LOG_LEVEL") or self._default_level()).upper()
        self._setup_logging()

    def _default_level(self) -> str:
        return "INFO" if self.environment == "production" else "DEBUG"

    def _setup_logging(self):
        """Configure structlog on top of stdlib logging"""
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer(),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        level = getattr(logging, self.level, logging.INFO)
        logging.basicConfig(level=level, format="%(message)s")
        # basicConfig is a no-op once handlers exist
        logging.getLogger().setLevel(level)

    def get_logger(self, name: str = None) -> structlog.stdlib.BoundLogger:
        """Get a structured logger instance"""
        logger_name = name or self.service_name
        return structlog.get_logger(logger_name)


_structured_logger = None


def get_structured_logger() -> StructuredLogger:
    """Get global structured logger instance"""
    global _structured_logger
    if _structured_logger is None:
        _structured_logger = StructuredLogger()
    return _structured_logger


def setup_logging(level: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Setup structured logging for the application"""
    global _structured_logger
    _structured_logger = StructuredLogger(level=level)
    return _structured_logger.get_logger()
