"""Structlog configuration and logger setup.

Importing langstore never configures logging. Applications call
configure_logging() once at startup, or configure structlog themselves;
module loggers pick up whichever configuration is active when they log.

Usage:
    from langstore.logging import get_module_logger

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from langstore.settings import get_settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    cache_logger_on_first_use: bool = True,
) -> BoundLogger:
    """Configure structured logging for an application using langstore.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to LANGSTORE_LOG_LEVEL.
        is_production: Optional override for production mode. Controls JSON
            vs console output. Defaults to the LANGSTORE_ENVIRONMENT check.
        cache_logger_on_first_use: Freeze each logger's configuration the
            first time it logs.

    Returns:
        Configured logger instance
    """
    settings = get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_logger_on_first_use,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    The logger is lazy: nothing is resolved until its first log call.

    Returns:
        Logger bound with "component" (last module path segment) and
        "module_path".

    Example:
        # In langstore/store.py
        logger = get_module_logger()
        # context: {"component": "store", "module_path": "langstore.store"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return structlog.stdlib.get_logger("langstore", component="unknown")

    module_name = module.__name__
    parts = module_name.split(".")
    return structlog.stdlib.get_logger(
        module_name, component=parts[-1], module_path=module_name
    )
