import logging
from typing import Any, List, Optional

import structlog

from auth_strategies.config.schemas.registry_schema import LoggingConfig

# Records go nowhere until the host (or setup_logging) attaches handlers
logging.getLogger("auth_strategies").addHandler(logging.NullHandler())


def _shared_processors() -> List[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_default_logging() -> None:
    """
    Route structlog through stdlib logging without touching any handlers.

    Used when the host has not configured structlog itself, so the host's
    stdlib logging setup decides what is emitted and where.
    """
    structlog.configure(
        processors=_shared_processors() + [structlog.processors.KeyValueRenderer()],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the package using structlog.

    Args:
        config: Logging configuration. If None, defaults are used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    # Create custom formatter that includes caller information
    class DetailedFormatter(logging.Formatter):
        def format(self, record):
            record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
            return super().format(record)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(DetailedFormatter(config.format))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=_shared_processors() + [structlog.dev.ConsoleRenderer(colors=False)],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = get_logger("auth_strategies")
    logger.debug("Logging configured", log_level=config.level)
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the given name."""
    return structlog.get_logger(name)


if not structlog.is_configured():
    configure_default_logging()
