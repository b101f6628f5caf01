"""Error reporting strategy for catalog failures."""

from enum import Enum
from typing import NoReturn

from core.logging import get_module_logger
from catalog.errors import CatalogError

logger = get_module_logger()


class ErrorPolicy(str, Enum):
    """How a catalog failure is reported.

    RAISE propagates the typed error to the caller. EXIT logs it at
    critical level and terminates the process.
    """

    RAISE = "raise"
    EXIT = "exit"

    @classmethod
    def from_string(cls, value: str) -> "ErrorPolicy":
        """Convert a configuration string to an ErrorPolicy.

        Raises:
            ValueError: If the value names no policy.
        """
        try:
            return cls(value.lower())
        except ValueError as e:
            raise ValueError(f"Unsupported error policy: {value}") from e


def report(error: CatalogError, policy: ErrorPolicy) -> NoReturn:
    """Report a catalog failure according to the policy.

    Args:
        error: The failure to report.
        policy: Whether to raise the error or terminate the process.

    Raises:
        CatalogError: Always under ErrorPolicy.RAISE.
        SystemExit: Always under ErrorPolicy.EXIT.
    """
    if policy is ErrorPolicy.EXIT:
        logger.critical(
            "catalog_fatal_error",
            error_event=error.event,
            error=error.message,
            exc_info=error,
            **error.context,
        )
        raise SystemExit(1) from error

    logger.error(error.event, error=error.message, **error.context)
    raise error
