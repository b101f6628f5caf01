"""Cross-locale consistency check for the message catalog."""

from core.logging import get_module_logger
from catalog.errors import CatalogConsistencyError
from catalog.models import Catalog

logger = get_module_logger()


def validate_catalog(catalog: Catalog) -> None:
    """Check that every locale defines the same message ids.

    The first locale in load order is the reference. Which locale is
    blamed can depend on that order; whether the check passes cannot.

    Args:
        catalog: Fully loaded catalog.

    Raises:
        CatalogConsistencyError: If a locale's id set differs from the
            reference locale's.
    """
    locales = catalog.locales()
    if not locales:
        logger.warning("catalog_empty")
        return

    reference_locale = locales[0]
    reference = catalog.messages(reference_locale)

    for locale in locales[1:]:
        messages = catalog.messages(locale)

        missing = next((k for k in reference if k not in messages), None)
        if missing is not None:
            raise CatalogConsistencyError(
                f"{locale} map is not equal to {reference_locale}, "
                f"missing messageId {missing}",
                locale=locale,
                message_id=missing,
                reference_locale=reference_locale,
            )

        if len(messages) != len(reference):
            extra = next(k for k in messages if k not in reference)
            raise CatalogConsistencyError(
                f"{locale}({len(messages)}) map length is not equal to "
                f"{reference_locale}({len(reference)}), extra messageId {extra}",
                locale=locale,
                message_id=extra,
                reference_locale=reference_locale,
            )

    logger.info(
        "catalog_validated",
        locales=locales,
        message_count=len(reference),
    )
