# sparsetpl/logging_setup.py
"""
Opt-in structlog configuration for applications using sparsetpl.

Importing the package configures nothing; every module only asks structlog
for a named logger. Call `configure_logging` once from the application to get
readable (or JSON) output for template compilation, glob matches and
execution failures.
"""
import logging
import sys
from typing import Any, List
import structlog

PACKAGE_LOGGER_NAME = "sparsetpl"

def _pre_chain() -> List[Any]:
    # processors applied before the event reaches the stdlib formatter.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.format_exc_info,
    ]

def build_handler(force_json_logs: bool = False) -> logging.Handler:
    """Returns a stderr handler rendering structlog events as console text or JSON lines."""
    if force_json_logs:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler = logging.StreamHandler()
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[structlog.stdlib.add_log_level],
    ))
    return handler

def configure_logging(
    log_level_str: str = "warning",
    force_json_logs: bool = False,
    logger_name: str = PACKAGE_LOGGER_NAME,
) -> logging.Logger:
    """
    Routes structlog through the stdlib logger `logger_name` and attaches one
    handler to it. Pass your application's logger name (or "" for the root
    logger) to collect sparsetpl events next to your own.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.WARNING)

    structlog.configure(
        processors=_pre_chain() + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    target_logger = logging.getLogger(logger_name)
    target_logger.handlers.clear()
    target_logger.addHandler(build_handler(force_json_logs))
    target_logger.setLevel(log_level)

    structlog.get_logger(__name__).info(
        "logging_configured", level=log_level_str, json=force_json_logs, logger=logger_name or "root"
    )
    return target_logger
