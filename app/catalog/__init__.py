"""Message catalog - localized message templates.

Loads <module>.<locale>.yml files into a catalog, checks that every
locale defines the same message ids, and renders messages on demand.

Main components:
- models: Catalog, Message, CompileState
- loader: CatalogLoader and YAMLCatalogLoader
- validator: validate_catalog cross-locale check
- translator: Translator service rendering Jinja2 templates
- factory: register_catalog startup entry point
- resolvers: LocaleResolver for request locale detection
"""

from catalog.errors import (
    CatalogConsistencyError,
    CatalogError,
    CatalogFrozenError,
    CatalogLoadError,
    CatalogParseError,
    CatalogReadError,
    DuplicateMessageError,
    EmptyMessageError,
    InvalidLocaleError,
    LocaleFileNameError,
    TemplateCompileError,
    TemplateRenderError,
    TranslationError,
    UnknownLocaleError,
    UnknownMessageError,
    UnsupportedFormatError,
)
from catalog.factory import register_catalog
from catalog.loader import (
    CatalogLoader,
    YAMLCatalogLoader,
    flatten_document,
    load_catalog,
)
from catalog.models import Catalog, CompileState, Message, parse_locale_tag
from catalog.policy import ErrorPolicy
from catalog.resolvers import LocaleResolver
from catalog.service import TranslationService
from catalog.translator import Translator, create_environment
from catalog.validator import validate_catalog

__all__ = [
    "Catalog",
    "CatalogConsistencyError",
    "CatalogError",
    "CatalogFrozenError",
    "CatalogLoadError",
    "CatalogLoader",
    "CatalogParseError",
    "CatalogReadError",
    "CompileState",
    "DuplicateMessageError",
    "EmptyMessageError",
    "ErrorPolicy",
    "InvalidLocaleError",
    "LocaleFileNameError",
    "LocaleResolver",
    "Message",
    "TemplateCompileError",
    "TemplateRenderError",
    "TranslationError",
    "TranslationService",
    "Translator",
    "UnknownLocaleError",
    "UnknownMessageError",
    "UnsupportedFormatError",
    "YAMLCatalogLoader",
    "create_environment",
    "flatten_document",
    "load_catalog",
    "parse_locale_tag",
    "register_catalog",
    "validate_catalog",
]
