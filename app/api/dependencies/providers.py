"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the message catalog
and the services built on top of it.
"""

from functools import lru_cache

from fastapi import Request

from api.errors import ErrorRegistry
from api.responses import X_LANGUAGE_HEADER
from catalog import LocaleResolver, TranslationService
from core.config import get_settings


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    The first call registers the catalog, so it must happen during
    startup, before requests are served concurrently.

    Returns:
        TranslationService: Cached service over the registered catalog.
    """
    return TranslationService()


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get application-scoped locale resolver singleton.

    Returns:
        LocaleResolver: Resolver configured from the i18n settings.
    """
    settings = get_settings()
    return LocaleResolver(
        supported_locales=settings.i18n.SUPPORTED_LOCALES,
        default_locale=settings.i18n.DEFAULT_LOCALE,
    )


@lru_cache
def get_error_registry() -> ErrorRegistry:
    """
    Get application-scoped error registry singleton.

    Returns:
        ErrorRegistry: Registry with the common error codes pre-translated.
    """
    settings = get_settings()
    return ErrorRegistry(
        translator=get_translation_service().translator,
        languages=settings.i18n.SUPPORTED_LOCALES,
        default_language=settings.i18n.DEFAULT_LOCALE,
    )


def get_request_language(request: Request) -> str:
    """Resolve the request language from the X-Language header."""
    return get_locale_resolver().resolve_from_header(
        request.headers.get(X_LANGUAGE_HEADER)
    )
