"""Factory functions for creating catalog components.

register_catalog() is the startup entry point: it loads the locale files,
checks them for cross-locale consistency, freezes the catalog and returns
a Translator ready to serve lookups.
"""

from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment

from core.config import settings
from core.logging import get_module_logger
from catalog.errors import CatalogError
from catalog.loader import YAMLCatalogLoader
from catalog.models import Catalog
from catalog.policy import ErrorPolicy, report
from catalog.translator import Translator
from catalog.validator import validate_catalog

logger = get_module_logger()


def default_locales_dir() -> Path:
    """Return the configured locale directory, or app/locales."""
    if settings.i18n.LOCALES_DIR:
        return Path(settings.i18n.LOCALES_DIR)
    # This file is at .../app/catalog/factory.py
    return Path(__file__).resolve().parents[1] / "locales"


def register_catalog(
    locales_dir: Union[str, Path, None] = None,
    policy: Optional[ErrorPolicy] = None,
    environment: Optional[Environment] = None,
) -> Translator:
    """Load, validate and freeze a catalog, and wrap it in a Translator.

    Must run once before any translation, and never concurrently with
    itself or with Translator.translate().

    Args:
        locales_dir: Directory of <module>.<locale>.yml files
            (default: I18N_LOCALES_DIR, else app/locales).
        policy: Error policy for loading and for the returned translator
            (default: I18N_ERROR_POLICY).
        environment: Optional Jinja2 environment for the translator.

    Returns:
        Translator: Translator over the frozen catalog.

    Raises:
        CatalogError: Under ErrorPolicy.RAISE, on any load or
            consistency failure.
        SystemExit: Under ErrorPolicy.EXIT, on the same failures.

    Usage:
        translator = register_catalog()
        translator.translate("en-US", "InternalError.Description")
    """
    if locales_dir is None:
        locales_dir = default_locales_dir()
    if policy is None:
        policy = ErrorPolicy.from_string(settings.i18n.ERROR_POLICY)

    catalog = Catalog()
    try:
        YAMLCatalogLoader(Path(locales_dir)).load(catalog)
        validate_catalog(catalog)
    except CatalogError as e:
        report(e, policy)

    catalog.freeze()
    logger.info(
        "catalog_registered",
        locales_dir=str(locales_dir),
        locales=catalog.locales(),
        policy=policy.value,
    )
    return Translator(catalog, environment=environment, policy=policy)
