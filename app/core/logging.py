"""Structured logging for the message catalog service.

Catalog failures are logged with ``exc_info`` set to the typed error, so
every renderer below is given a way to show the error and its chain.
"""

import inspect
import logging
import sys
from typing import Any, List, MutableMapping

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from .config import settings

EventDict = MutableMapping[str, Any]


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def add_release(_logger: Any, _method_name: str, event_dict: EventDict) -> EventDict:
    """Tag each event with the deployed build."""
    event_dict.setdefault("git_sha", settings.GIT_SHA)
    return event_dict


def build_processors(production: bool, testing: bool = False) -> List[Processor]:
    """Return the structlog processor chain.

    Args:
        production: Render JSON lines instead of console output.
        testing: Build the reduced chain used while pytest runs.
    """
    if testing:
        return [
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]

    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if production:
        # JSONRenderer cannot serialize exc_info itself.
        processors += [
            add_release,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging() -> BoundLogger:
    """Configure structlog on top of the standard logging module.

    Under pytest, events are still processed but the root level keeps
    them from being emitted.
    """
    testing = _is_test_environment()
    if testing:
        level = logging.CRITICAL + 1
    else:
        level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    structlog.configure(
        processors=build_processors(settings.is_production, testing=testing),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=testing)
    logging.root.setLevel(level)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    ``catalog.loader`` yields ``component="loader"`` and
    ``module_path="catalog.loader"``.
    """
    frame = inspect.currentframe()
    module = inspect.getmodule(frame.f_back) if frame is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
