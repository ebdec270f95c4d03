"""
Centralized logging configuration for the lesson modules.

This module provides standardized logging configuration using structlog
for all lessons. Lesson code should obtain loggers from here so that the
demo scripts and tests see consistent, structured output.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Lesson output goes to stdout, so keep log records on stderr
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_lesson_logger(name: str, lesson: str) -> FilteringBoundLogger:
    """
    Get a logger bound to a single lesson.

    Args:
        name: Logger name (typically __name__)
        lesson: Pattern taught by the calling module, e.g. "chain"

    Returns:
        Configured structlog logger carrying the lesson context
    """
    # Initial values keep the proxy lazy, so module-level loggers pick up
    # whatever configure_logging() installs later
    return structlog.get_logger(name, subsystem="lessons", lesson=lesson)


def log_handler_decision(
    logger: FilteringBoundLogger,
    handler: str,
    denomination: int,
    notes: int,
    remaining: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log one hop of a chain of responsibility.

    Args:
        logger: Structlog logger instance
        handler: Name of the handler that processed the request
        denomination: Denomination the handler is responsible for
        notes: Number of notes the handler took
        remaining: Amount left for the next handler
        context: Additional context data
    """
    bound_logger = logger.bind(
        handler=handler,
        denomination=denomination,
        notes=notes,
        remaining=remaining
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if remaining > 0:
        bound_logger.debug("Handler forwarding remainder")
    else:
        bound_logger.debug("Handler completed request")


def log_command_event(
    logger: FilteringBoundLogger,
    slot: int,
    command: str,
    action: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a command execution or undo with standardized format.

    Args:
        logger: Structlog logger instance
        slot: Remote button slot that was pressed
        command: Command class name
        action: "execute" or "undo"
        context: Additional context data
    """
    bound_logger = logger.bind(
        slot=slot,
        command=command,
        action=action
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Command dispatched")
