"""
Logging infrastructure for the claim document generator.

Provides structured logging with structlog for:
- Document rendering and downloads
- Archive downloads
- Validation refusals and generation failures
"""

import logging
import structlog


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """
    Configure structlog for the generator.

    Uses stdout for container compatibility (no file configuration).

    Args:
        level: Minimum log level name (e.g., "INFO", "DEBUG")
        json_output: Render JSON lines when True, human-readable console output otherwise
    """
    if json_output:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format="%(levelname)s %(name)s: %(message)s")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *renderers,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a bound logger with the specified module name.

    Args:
        name: Module name for log attribution (e.g., "document_service")

    Returns:
        BoundLogger instance with module context
    """
    return structlog.get_logger(module=name)
