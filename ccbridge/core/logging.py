"""Structlog configuration rendered through Rich or as JSON lines."""

import logging
import sys
from typing import Any

import structlog
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme


# Custom theme for the logger
CUSTOM_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "critical": "bold white on red",
        "debug": "dim white",
        "timestamp": "dim cyan",
        "path": "dim blue",
    }
)


def setup_logging(
    json_logs: bool = False,
    log_level_name: str = "INFO",
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        json_logs: Emit one JSON object per line instead of Rich console output
        log_level_name: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler: logging.Handler
    if json_logs:
        renderer: Any = structlog.processors.JSONRenderer()
        extra_processors: list[Any] = [
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
        ]
        handler = logging.StreamHandler(sys.stderr)
    else:
        # Rich draws level and time columns itself
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        extra_processors = []
        handler = RichHandler(
            console=Console(theme=CUSTOM_THEME, stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                *extra_processors,
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logging.basicConfig(
        level=getattr(logging, log_level_name.upper()),
        handlers=[handler],
        force=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger instance with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog bound logger
    """
    return structlog.get_logger(name)
