"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the catalog dependencies.
"""

from typing import Annotated

from fastapi import Depends

from api.errors import ErrorRegistry
from api.dependencies.providers import (
    get_error_registry,
    get_locale_resolver,
    get_request_language,
    get_translation_service,
)
from catalog import LocaleResolver, TranslationService
from core.config import Settings, get_settings

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translation service dependency
TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]

# Locale resolver dependency
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

# Error registry dependency
ErrorRegistryDep = Annotated[ErrorRegistry, Depends(get_error_registry)]

# Language of the current request, from the X-Language header
LanguageDep = Annotated[str, Depends(get_request_language)]

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "LocaleResolverDep",
    "ErrorRegistryDep",
    "LanguageDep",
    "get_error_registry",
    "get_locale_resolver",
    "get_request_language",
    "get_translation_service",
]
