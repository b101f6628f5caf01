"""Error types raised by the message catalog.

Every error carries a structlog event name and a context mapping so the
error policy can log it the same way it is raised.
"""

from typing import Any, Dict


class CatalogError(Exception):
    """Base class for all message catalog failures.

    Attributes:
        event: snake_case event name used when the error is logged.
        context: Key/value details describing the failure.
    """

    event = "catalog_error"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class CatalogLoadError(CatalogError):
    """Structural problem found while loading locale files."""

    event = "catalog_load_failed"


class CatalogReadError(CatalogLoadError):
    """Locale directory or locale file could not be read."""

    event = "locale_file_unreadable"


class LocaleFileNameError(CatalogLoadError):
    """Locale filename is not <module>.<locale>.yml."""

    event = "locale_filename_invalid"


class InvalidLocaleError(CatalogLoadError):
    """Locale segment of a filename is not a valid language tag."""

    event = "locale_tag_invalid"


class CatalogParseError(CatalogLoadError):
    """Locale file is not a well-formed document."""

    event = "locale_file_unparseable"


class UnsupportedFormatError(CatalogLoadError):
    """Document holds a value that is neither a string nor a mapping."""

    event = "unsupported_data_format"


class EmptyMessageError(CatalogLoadError):
    """Message source is the empty string."""

    event = "message_empty"


class DuplicateMessageError(CatalogLoadError):
    """Message id is already defined for the locale."""

    event = "message_already_exists"


class CatalogFrozenError(CatalogLoadError):
    """Catalog no longer accepts new messages."""

    event = "catalog_frozen"


class CatalogConsistencyError(CatalogError):
    """Locales do not define the same set of message ids.

    Attributes:
        locale: Locale whose id set differs from the reference.
        message_id: A missing or extra message id.
        reference_locale: Locale the others are compared against.
    """

    event = "catalog_inconsistent"

    def __init__(
        self, message: str, locale: str, message_id: str, reference_locale: str
    ):
        super().__init__(
            message,
            locale=locale,
            message_id=message_id,
            reference_locale=reference_locale,
        )
        self.locale = locale
        self.message_id = message_id
        self.reference_locale = reference_locale


class TranslationError(CatalogError):
    """Failure while resolving or rendering a message."""

    event = "translation_failed"


class UnknownLocaleError(TranslationError, KeyError):
    """No messages are loaded for the requested locale."""

    event = "locale_not_found"

    def __str__(self) -> str:
        return self.message


class UnknownMessageError(TranslationError, KeyError):
    """Message id is not defined for the requested locale."""

    event = "message_not_found"

    def __str__(self) -> str:
        return self.message


class TemplateCompileError(TranslationError):
    """Message source is not a valid template."""

    event = "template_compile_failed"


class TemplateRenderError(TranslationError):
    """Compiled template failed while rendering."""

    event = "template_render_failed"
