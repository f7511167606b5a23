"""Structured logging for the UI strings layer.

Usage:
    from core.logging import get_module_logger

    logger = get_module_logger()
    logger.error("translation_file_unreadable", path=str(path))
"""

import logging
import inspect
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from .config import settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard library logging module.

    Args:
        log_level: Override for settings.LOG_LEVEL.
        is_production: Override for settings.is_production. Selects JSON
            output over the console renderer.

    Returns:
        The root structlog logger.
    """
    if _is_test_environment():
        # Missing keys and skipped bundles are expected in tests; keep the
        # output quiet
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    level_name = (log_level or settings.LOG_LEVEL).upper()
    production = settings.is_production if is_production is None else is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module's name."""
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    module = inspect.getmodule(current_frame.f_back)
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
